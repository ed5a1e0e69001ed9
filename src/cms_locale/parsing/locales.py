"""Locale specs and per-locale field resolution."""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Sequence, Tuple, Union


class _Missing:
    """Marker for a field that has no value in any candidate locale."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


@dataclass(frozen=True)
class LocaleSpec:
    """
    One configured output locale.

    A spec is either a single code or an ordered fallback list of codes.
    Either way it is stored as a non-empty tuple; the first code labels
    the projected record.
    """

    codes: Tuple[str, ...]
    kind: str = "single"  # single | fallback

    def __post_init__(self):
        if not self.codes:
            raise ValueError("Locale spec needs at least one locale code")
        for code in self.codes:
            if not isinstance(code, str) or not code.strip():
                raise ValueError(f"Invalid locale code: {code!r}")
        if self.kind not in ("single", "fallback"):
            raise ValueError(f"Unknown locale spec kind: {self.kind}")
        if self.kind == "single" and len(self.codes) != 1:
            raise ValueError("Single locale spec must hold exactly one code")

    @classmethod
    def single(cls, code: str) -> "LocaleSpec":
        return cls(codes=(code,), kind="single")

    @classmethod
    def fallback(cls, codes: Iterable[str]) -> "LocaleSpec":
        return cls(codes=tuple(codes), kind="fallback")

    @classmethod
    def parse(cls, value: Union["LocaleSpec", str, Sequence[str]]) -> "LocaleSpec":
        """
        Normalize a configured locale value.

        Accepts an existing LocaleSpec, a single code ("en-US"), or an
        ordered list of codes (["de-CH", "de-DE"]).

        Raises:
            ValueError: If the value is empty or holds non-string codes
        """
        if isinstance(value, LocaleSpec):
            return value
        if isinstance(value, str):
            return cls.single(value)
        if isinstance(value, (list, tuple)):
            return cls.fallback(value)
        raise ValueError(f"Locale must be a code or a list of codes, got {type(value).__name__}")

    @property
    def label(self) -> str:
        """Code written to the record's `locale` key."""
        return self.codes[0]


def parse_locale_specs(values: Union[None, Sequence[Any]]) -> Tuple[LocaleSpec, ...]:
    """Normalize a configured locale list. None or empty means no localization."""
    if not values:
        return ()
    if isinstance(values, (str, LocaleSpec)):
        raise ValueError("Locales must be given as a list")
    return tuple(LocaleSpec.parse(value) for value in values)


def resolve_field(field_locale_map: Mapping[str, Any], locale_spec: Union[LocaleSpec, str, Sequence[str]]) -> Any:
    """
    Resolve one value from a locale-keyed field map.

    Candidates are tried in order; the first code present with a non-None
    value wins. Returns MISSING when no candidate has a value.

    Example:
        >>> resolve_field({"en": "A", "fr": "B"}, ["de", "fr", "en"])
        'B'
    """
    spec = LocaleSpec.parse(locale_spec)
    for code in spec.codes:
        value = field_locale_map.get(code)
        if value is not None:
            return value
    return MISSING


def project_fields(fields: Mapping[str, Mapping[str, Any]], locale_spec: LocaleSpec) -> Dict[str, Any]:
    """
    Flatten all fields of an entry to a single locale.

    Fields without a value for the spec are left out. The `locale` key is
    set last so it always carries the spec label.
    """
    projected: Dict[str, Any] = {}
    for key, locale_map in fields.items():
        value = resolve_field(locale_map, locale_spec)
        if value is not MISSING:
            projected[key] = value
    projected["locale"] = locale_spec.label
    return projected
