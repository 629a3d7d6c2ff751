"""
Класифікація коротких рядків як форм файлових шляхів.

Відповідальність: відповісти на чотири питання про рядок
- це рівно drive spec ("C:")?
- рядок починається з drive spec?
- рядок починається з UNC префікса ("\\\\server\\share")?
- рядок рівно UNC root?

Перевірки drive spec виконуються прямою інспекцією символів. UNC
перевірки використовують regex, скомпільований один раз при створенні.
"""

import logging
import re
from typing import Optional

from core.config import config

logger = logging.getLogger(__name__)


# Рядок рівно "<літера>:" без жодних символів після
DRIVE_PATTERN: re.Pattern = re.compile(r"^[A-Za-z]:\Z")

# Рядок, що починається з "<літера>:"
START_WITH_DRIVE_PATTERN: re.Pattern = re.compile(r"^[A-Za-z]:")


def _is_ascii_letter(ch: str) -> bool:
    return ("A" <= ch <= "Z") or ("a" <= ch <= "z")


def build_unc_pattern(separator: str, alt_separator: str) -> str:
    """
    Будує regex для "\\\\server\\share" з довільною комбінацією роздільників.

    Args:
        separator: Основний роздільник платформи
        alt_separator: Альтернативний роздільник платформи

    Returns:
        Неанкорований в кінці regex (тільки ^ на початку)
    """
    seps = re.escape(separator) + re.escape(alt_separator)
    sep = f"[{seps}]"
    segment = f"[^{seps}]+"
    return f"^{sep}{sep}{segment}{sep}{segment}"


class PathPatternMatcher:
    """
    Набір незмінних скомпільованих patterns для форм шляхів.

    Стан після __init__ не змінюється, тому один екземпляр можна
    опитувати з будь-якої кількості потоків без блокувань.
    """

    def __init__(self, separator: str, alt_separator: str):
        self.separator = separator
        self.alt_separator = alt_separator

        base_unc_pattern = build_unc_pattern(separator, alt_separator)
        # UNC шлях, що починається з "\\<server>\<share>"
        self.starts_with_unc_pattern: re.Pattern = re.compile(base_unc_pattern)
        # UNC шлях рівно "\\<server>\<share>"
        self.unc_pattern: re.Pattern = re.compile(base_unc_pattern + r"\Z")

    @staticmethod
    def is_drive_spec(s: Optional[str]) -> bool:
        """Чи рядок рівно "<літера>:" (еквівалент DRIVE_PATTERN)."""
        # Довжина перевіряється першою, щоб відсікти "C::"
        return s is not None and len(s) == 2 and PathPatternMatcher.starts_with_drive_spec(s)

    @staticmethod
    def starts_with_drive_spec(s: Optional[str]) -> bool:
        """
        Чи рядок починається з "<літера>:" (еквівалент START_WITH_DRIVE_PATTERN).

        Перевірка двокрапки стосується обох діапазонів літер.
        """
        if not s or len(s) < 2:
            return False
        return _is_ascii_letter(s[0]) and s[1] == ":"

    def starts_with_unc_prefix(self, s: Optional[str]) -> bool:
        if not s:
            return False
        return self.starts_with_unc_pattern.match(s) is not None

    def is_unc_root(self, s: Optional[str]) -> bool:
        if not s:
            return False
        return self.unc_pattern.match(s) is not None

    def __repr__(self) -> str:
        return (
            f"PathPatternMatcher(separator={self.separator!r}, "
            f"alt_separator={self.alt_separator!r})"
        )


_default_matcher: Optional[PathPatternMatcher] = None


def get_default_matcher() -> PathPatternMatcher:
    """
    Повертає process-wide matcher з роздільниками з конфігурації.

    Lazy init без lock: паралельна перша ініціалізація створить
    еквівалентні незмінні об'єкти, тож перегони нешкідливі.
    """
    global _default_matcher
    matcher = _default_matcher
    if matcher is None:
        separator, alt_separator = config.separators()
        matcher = PathPatternMatcher(separator, alt_separator)
        _default_matcher = matcher
        logger.info(f"Default path matcher initialized: {matcher!r}")
    return matcher


def reset_default_matcher() -> None:
    """Скидає кешований matcher (після зміни конфігурації)."""
    global _default_matcher
    _default_matcher = None


def is_drive_spec(s: Optional[str]) -> bool:
    return PathPatternMatcher.is_drive_spec(s)


def starts_with_drive_spec(s: Optional[str]) -> bool:
    return PathPatternMatcher.starts_with_drive_spec(s)


def starts_with_unc_prefix(s: Optional[str]) -> bool:
    return get_default_matcher().starts_with_unc_prefix(s)


def is_unc_root(s: Optional[str]) -> bool:
    return get_default_matcher().is_unc_root(s)
