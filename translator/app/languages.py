from collections.abc import Iterator, Mapping
from types import MappingProxyType


class UnknownLanguageError(KeyError):
    def __init__(self, code: str) -> None:
        super().__init__(code)
        self.code = code

    def __str__(self) -> str:
        return f"Unknown language code: {self.code!r}"


class LanguageRegistry(Mapping[str, str]):
    """Read-only code -> display name table loaded once from the provider.

    The first entry is the provider's auto-detect sentinel. It is a valid key
    but is not advertised as a translation target.
    """

    def __init__(self, entries: Mapping[str, str]) -> None:
        if not entries:
            raise ValueError("Language registry requires at least one entry.")
        self._entries = MappingProxyType(dict(entries))

    def __getitem__(self, code: str) -> str:
        return self._entries[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def sentinel(self) -> str:
        return next(iter(self._entries))

    def codes(self) -> list[str]:
        return list(self._entries)

    def supported_targets(self) -> list[str]:
        return self.codes()[1:]

    def display_name(self, code: str) -> str:
        try:
            return self._entries[code]
        except KeyError:
            raise UnknownLanguageError(code) from None

    def lowercase_name(self, code: str) -> str:
        return self.display_name(code).lower()
