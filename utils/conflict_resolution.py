"""
Розв'язання конфліктів між перетинаючимися знахідками шляхів.

Приклад конфлікту: у "\\\\srv\\C:\\build" UNC_PATH охоплює весь рядок,
а DRIVE_PATH знаходить "C:\\build" всередині нього.
"""

from typing import List, Protocol

from presidio_analyzer import RecognizerResult


class ConflictResolutionStrategy(Protocol):
    """Протокол для стратегій розв'язання конфліктів."""

    def resolve(self, results: List[RecognizerResult]) -> List[RecognizerResult]:
        ...


def _overlaps(result: RecognizerResult, kept: List[RecognizerResult]) -> bool:
    return any(
        not (result.end <= existing.start or result.start >= existing.end)
        for existing in kept
    )


class ScoreBasedResolver:
    """
    При перетині залишається знахідка з вищим score, далі довша.
    """

    @staticmethod
    def resolve(results: List[RecognizerResult]) -> List[RecognizerResult]:
        if not results:
            return results

        sorted_results = sorted(
            results,
            key=lambda x: (-x.score, -(x.end - x.start), x.start)
        )

        filtered: List[RecognizerResult] = []
        for result in sorted_results:
            if not _overlaps(result, filtered):
                filtered.append(result)

        # Повертаємо у порядку зростання позиції для стабільності
        return sorted(filtered, key=lambda x: x.start)


class LongestSpanResolver:
    """
    При перетині залишається найдовший шлях незалежно від score.
    """

    @staticmethod
    def resolve(results: List[RecognizerResult]) -> List[RecognizerResult]:
        if not results:
            return results

        sorted_results = sorted(
            results,
            key=lambda x: (-(x.end - x.start), -x.score, x.start)
        )

        filtered: List[RecognizerResult] = []
        for result in sorted_results:
            if not _overlaps(result, filtered):
                filtered.append(result)

        return sorted(filtered, key=lambda x: x.start)


def remove_overlapping_paths(
    results: List[RecognizerResult],
    strategy: str = "score"
) -> List[RecognizerResult]:
    """
    Публічний API для розв'язання конфліктів.

    Args:
        results: Список знайдених шляхів
        strategy: Стратегія розв'язання ("score" або "longest")

    Returns:
        Список шляхів без перетинів

    Raises:
        ValueError: Якщо strategy невідома
    """
    resolvers = {
        "score": ScoreBasedResolver,
        "longest": LongestSpanResolver
    }

    if strategy not in resolvers:
        raise ValueError(
            f"Unknown strategy '{strategy}'. "
            f"Available: {list(resolvers.keys())}"
        )

    return resolvers[strategy].resolve(results)
