"""Immutable tokenizer configuration shared by the text-processing functions."""

from typing import Any, FrozenSet, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TokenizerConfig(BaseModel):
    """Constants that drive normalization, tokenization and trigram generation."""

    model_config = ConfigDict(frozen=True)

    min_token_length: int = Field(default=2, ge=1, description="Shortest token kept by the tokenizer")
    min_trigram_token_length: int = Field(
        default=4, ge=3, description="Shortest token that produces trigrams"
    )
    stop_words: FrozenSet[str] = Field(
        default=frozenset({"a", "an", "the", "in", "of", "to"}),
        description="Normalized words dropped by the tokenizer",
    )
    symbol_substitutions: Tuple[Tuple[str, str], ...] = Field(
        default=(("#", "sharp"), ("+", "plus")),
        description="Trailing symbols spelled out before stripping (C# -> csharp), as (symbol, word) pairs",
    )

    @field_validator("symbol_substitutions", mode="before")
    @classmethod
    def freeze_symbols(cls, v: Any) -> Any:
        """Accept a mapping and store it as sorted pairs."""
        if isinstance(v, Mapping):
            return tuple(sorted(v.items()))
        return v

    @field_validator("symbol_substitutions")
    @classmethod
    def validate_symbols(cls, v: Tuple[Tuple[str, str], ...]) -> Tuple[Tuple[str, str], ...]:
        """Substitutions are keyed by distinct single characters."""
        seen = set()
        for symbol, _ in v:
            if len(symbol) != 1:
                raise ValueError(f"Substitution key must be a single character: {symbol!r}")
            if symbol in seen:
                raise ValueError(f"Duplicate substitution key: {symbol!r}")
            seen.add(symbol)
        return v

    def substitution_table(self) -> Mapping[str, str]:
        """Return a fresh symbol -> word mapping."""
        return dict(self.symbol_substitutions)


DEFAULT_CONFIG = TokenizerConfig()
