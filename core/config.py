"""
Централізована конфігурація розпізнавання шляхів.

Архітектурний принцип: Single Source of Truth для роздільників шляху
та типів сутностей. Matcher отримує роздільники як параметр і сам
конфігурацію не читає.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass
class EntityConfig:
    """Конфігурація для окремої сутності."""
    name: str
    description: str
    enabled: bool = True
    score: float = 0.6


def _default_separator() -> str:
    return os.sep


def _default_alt_separator() -> str:
    # На POSIX altsep відсутній, тоді обидва роздільники однакові
    return os.altsep or os.sep


@dataclass
class PathConfig:
    """Глобальна конфігурація розпізнавання шляхів."""

    # Роздільники платформи
    DIRECTORY_SEPARATOR: str = field(default_factory=_default_separator)
    ALT_DIRECTORY_SEPARATOR: str = field(default_factory=_default_alt_separator)

    # Обмеження
    MAX_TEXT_LENGTH: int = 100_000

    # Сутності, які знаходить PathPatternRecognizer
    PATH_ENTITIES: Dict[str, EntityConfig] = field(default_factory=lambda: {
        "DRIVE_PATH": EntityConfig("DRIVE_PATH", "Шляхи з літерою диска (C:\\...)"),
        "UNC_PATH": EntityConfig("UNC_PATH", "Мережеві шляхи \\\\server\\share", score=0.7),
    })

    def separators(self) -> Tuple[str, str]:
        """Повертає пару (основний, альтернативний) роздільник."""
        return self.DIRECTORY_SEPARATOR, self.ALT_DIRECTORY_SEPARATOR

    def get_enabled_path_entities(self) -> List[str]:
        """Повертає список активних сутностей."""
        return [
            name for name, entity in self.PATH_ENTITIES.items()
            if entity.enabled
        ]

    def update_entity_state(self, entity_type: str, enabled: bool) -> None:
        """Оновлює стан активності сутності."""
        if entity_type in self.PATH_ENTITIES:
            self.PATH_ENTITIES[entity_type].enabled = enabled


# Глобальний екземпляр конфігурації
config = PathConfig()
