"""
Pattern-based recognizers для шляхів у довільному тексті (Presidio).

Архітектурна стратегія: Presidio знаходить кандидатів широким regex,
а строгий PathPatternMatcher відкидає зайвих через invalidate_result.
Сегменти шляху не містять пробілів, тож "C:\\Program Files" дає "C:\\Program".
"""

import logging
import re
from typing import List, Optional

from presidio_analyzer import AnalyzerEngine, Pattern, PatternRecognizer
from presidio_analyzer.nlp_engine import NlpArtifacts, NlpEngine
from presidio_analyzer import RecognizerResult

from core.config import config
from core.path_patterns import PathPatternMatcher, get_default_matcher
from utils.conflict_resolution import remove_overlapping_paths

logger = logging.getLogger(__name__)


class SimpleNoOpNlpEngine(NlpEngine):
    """
    Мінімальний NLP engine stub для Presidio.

    Presidio за замовчуванням вимагає spaCy модель. Pattern recognizers
    її не потребують, тому повертаємо порожні artifacts.
    """

    def __init__(self, supported_languages: Optional[List[str]] = None):
        self._supported_languages = supported_languages or ["en"]
        self._loaded = True

    def load(self) -> None:
        self._loaded = True

    def is_loaded(self) -> bool:
        return self._loaded

    def process_text(self, text: str, language: str) -> NlpArtifacts:
        return NlpArtifacts(
            entities=[],
            tokens=[],
            lemmas=[],
            tokens_indices=[],
            nlp_engine=self,
            language=language
        )

    def process_batch(
        self,
        texts: List[str],
        language: str,
        batch_size: int = 1,
        n_process: int = 1,
        **kwargs
    ):
        for text in texts:
            yield text, self.process_text(text, language)

    def is_stopword(self, word: str, language: str) -> bool:
        return False

    def is_punct(self, word: str, language: str) -> bool:
        return False

    def get_supported_entities(self) -> List[str]:
        return []

    def get_supported_languages(self) -> List[str]:
        return list(self._supported_languages)


PATH_CONTEXT = [
    "path", "file", "dir", "directory", "folder", "share", "drive",
    "шлях", "файл", "папка", "диск",
]


class DrivePathRecognizer(PatternRecognizer):
    """
    Знаходить шляхи з літерою диска: "C:", "C:\\src\\app.csproj".

    Кандидат має починатися на межі слова, щоб "https:" не давав "s:".
    """

    def __init__(self, matcher: PathPatternMatcher, score: float = 0.6):
        seps = re.escape(matcher.separator) + re.escape(matcher.alt_separator)
        segment = f"[^\\s{seps}\"'<>|]+"
        pattern = Pattern(
            name="drive_path",
            regex=rf"\b[A-Za-z]:(?:[{seps}]{segment})*[{seps}]?",
            score=score
        )
        super().__init__(
            supported_entity="DRIVE_PATH",
            patterns=[pattern],
            context=PATH_CONTEXT,
            supported_language="en"
        )
        self._matcher = matcher

    def invalidate_result(self, pattern_text: str) -> Optional[bool]:
        # IGNORECASE у Presidio пропускає не-ASCII літери (напр. "ſ", Kelvin sign)
        return not self._matcher.starts_with_drive_spec(pattern_text)


class UncPathRecognizer(PatternRecognizer):
    """Знаходить мережеві шляхи "\\\\server\\share[\\...]" у тексті."""

    def __init__(self, matcher: PathPatternMatcher, score: float = 0.7):
        seps = re.escape(matcher.separator) + re.escape(matcher.alt_separator)
        segment = f"[^\\s{seps}\"'<>|]+"
        pattern = Pattern(
            name="unc_path",
            # Не всередині URL ("http://host/x") і не посеред слова
            regex=rf"(?<![^\s\"'(=])[{seps}]{{2}}{segment}[{seps}]{segment}(?:[{seps}]{segment})*",
            score=score
        )
        super().__init__(
            supported_entity="UNC_PATH",
            patterns=[pattern],
            context=PATH_CONTEXT,
            supported_language="en"
        )
        self._matcher = matcher

    def invalidate_result(self, pattern_text: str) -> Optional[bool]:
        return not self._matcher.starts_with_unc_prefix(pattern_text)


class PathPatternRecognizer:
    """
    Wrapper над Presidio Analyzer з recognizers для шляхів.

    Singleton: recognizers реєструються один раз на процес.
    """

    _instance: Optional['PathPatternRecognizer'] = None
    _analyzer: Optional[AnalyzerEngine] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not hasattr(self, '_initialized'):
            self._initialized = True
            self._setup_analyzer()
            logger.info("PathPatternRecognizer initialized")

    def _setup_analyzer(self) -> None:
        """Створює analyzer зі stub NLP engine та реєструє path recognizers."""
        self._analyzer = AnalyzerEngine(
            nlp_engine=SimpleNoOpNlpEngine(),
            supported_languages=["en"]
        )

        matcher = get_default_matcher()
        self._matcher = matcher
        entities = config.PATH_ENTITIES

        self._analyzer.registry.add_recognizer(
            DrivePathRecognizer(matcher, score=entities["DRIVE_PATH"].score)
        )
        self._analyzer.registry.add_recognizer(
            UncPathRecognizer(matcher, score=entities["UNC_PATH"].score)
        )
        logger.info(f"Registered path recognizers for {matcher!r}")

    def analyze(
        self,
        text: str,
        enabled_entities: Optional[List[str]] = None,
        language: str = "en",
        conflict_strategy: Optional[str] = "score"
    ) -> List[RecognizerResult]:
        """
        Знаходить шляхи в тексті.

        Args:
            text: Текст для аналізу
            enabled_entities: Типи для пошуку. None = активні з конфігурації.
            language: Мова для аналізу
            conflict_strategy: "score", "longest" або None (без розв'язання перетинів)

        Returns:
            Список RecognizerResult, відсортований за позицією

        Raises:
            ValueError: Якщо text порожній, завеликий або strategy невідома
            RuntimeError: Якщо Presidio завершився з помилкою
        """
        if not text or not text.strip():
            raise ValueError("Текст не може бути порожнім")

        if len(text) > config.MAX_TEXT_LENGTH:
            raise ValueError(
                f"Текст завеликий: {len(text)} символів "
                f"(max {config.MAX_TEXT_LENGTH})"
            )

        if enabled_entities is None:
            enabled_entities = config.get_enabled_path_entities()

        if not enabled_entities:
            return []

        try:
            results = self._analyzer.analyze(
                text=text,
                entities=enabled_entities,
                language=language
            )
        except Exception as e:
            logger.error(f"Error during path analysis: {e}")
            raise RuntimeError(f"Помилка path detection: {e}") from e

        logger.info(f"Found {len(results)} path entities")

        if conflict_strategy is not None:
            results = remove_overlapping_paths(results, strategy=conflict_strategy)

        return sorted(results, key=lambda x: (x.start, x.end))

    @property
    def matcher(self) -> PathPatternMatcher:
        """Matcher, з роздільниками якого зареєстровано recognizers."""
        return self._matcher

    @property
    def supported_entities(self) -> List[str]:
        """Типи сутностей, зареєстровані path recognizers."""
        return list(config.PATH_ENTITIES.keys())
