"""Script and language detection for token spans.

Responsibilities:
- Define the closed `Script` and `Language` sets understood by normalizers.
- Narrow open-set labels from an injected classifier through explicit tables.
- Memoize detection per originating span so derived tokens share one result.

Key types:
- `TextClassifier`: protocol for the external statistical classifier.
- `DefaultTextClassifier`: `regex` script counting plus `langdetect`.
- `SpanDetection`: lazy, memoized script/language pair for one text span.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Mapping, Protocol

import regex
from langdetect import DetectorFactory, detect_langs
from langdetect.lang_detect_exception import LangDetectException


class Script(str, Enum):
    """Writing systems with dedicated normalization support."""

    ARABIC = "Arabic"
    BENGALI = "Bengali"
    CYRILLIC = "Cyrillic"
    DEVANAGARI = "Devanagari"
    ETHIOPIC = "Ethiopic"
    GEORGIAN = "Georgian"
    GREEK = "Greek"
    GUJARATI = "Gujarati"
    GURMUKHI = "Gurmukhi"
    HAN = "Han"
    HANGUL = "Hangul"
    HEBREW = "Hebrew"
    HIRAGANA = "Hiragana"
    KANNADA = "Kannada"
    KATAKANA = "Katakana"
    KHMER = "Khmer"
    LATIN = "Latin"
    MALAYALAM = "Malayalam"
    MYANMAR = "Myanmar"
    ORIYA = "Oriya"
    SINHALA = "Sinhala"
    TAMIL = "Tamil"
    TELUGU = "Telugu"
    THAI = "Thai"
    OTHER = "Other"


class Language(str, Enum):
    """Languages with dedicated normalization support (ISO 639-3 values)."""

    EPO = "epo"
    ENG = "eng"
    RUS = "rus"
    CMN = "cmn"
    SPA = "spa"
    POR = "por"
    ITA = "ita"
    BEN = "ben"
    FRA = "fra"
    DEU = "deu"
    UKR = "ukr"
    KAT = "kat"
    ARA = "ara"
    HIN = "hin"
    JPN = "jpn"
    HEB = "heb"
    YID = "yid"
    POL = "pol"
    AMH = "amh"
    JAV = "jav"
    KOR = "kor"
    NOB = "nob"
    DAN = "dan"
    SWE = "swe"
    FIN = "fin"
    TUR = "tur"
    NLD = "nld"
    HUN = "hun"
    CES = "ces"
    ELL = "ell"
    BUL = "bul"
    BEL = "bel"
    MAR = "mar"
    KAN = "kan"
    RON = "ron"
    SLV = "slv"
    HRV = "hrv"
    SRP = "srp"
    MKD = "mkd"
    LIT = "lit"
    LAV = "lav"
    EST = "est"
    TAM = "tam"
    VIE = "vie"
    URD = "urd"
    THA = "tha"
    GUJ = "guj"
    UZB = "uzb"
    PAN = "pan"
    AZE = "aze"
    IND = "ind"
    TEL = "tel"
    PES = "pes"
    MAL = "mal"
    ORI = "ori"
    MYA = "mya"
    NEP = "nep"
    SIN = "sin"
    KHM = "khm"
    TUK = "tuk"
    AKA = "aka"
    ZUL = "zul"
    SNA = "sna"
    AFR = "afr"
    LAT = "lat"
    SLK = "slk"
    CAT = "cat"
    TGL = "tgl"
    OTHER = "other"


# Keys are casefolded Unicode script names.
SCRIPT_LABELS: Mapping[str, Script] = {
    "arabic": Script.ARABIC,
    "bengali": Script.BENGALI,
    "cyrillic": Script.CYRILLIC,
    "devanagari": Script.DEVANAGARI,
    "ethiopic": Script.ETHIOPIC,
    "georgian": Script.GEORGIAN,
    "greek": Script.GREEK,
    "gujarati": Script.GUJARATI,
    "gurmukhi": Script.GURMUKHI,
    "han": Script.HAN,
    "mandarin": Script.HAN,
    "hangul": Script.HANGUL,
    "hebrew": Script.HEBREW,
    "hiragana": Script.HIRAGANA,
    "kannada": Script.KANNADA,
    "katakana": Script.KATAKANA,
    "khmer": Script.KHMER,
    "latin": Script.LATIN,
    "malayalam": Script.MALAYALAM,
    "myanmar": Script.MYANMAR,
    "oriya": Script.ORIYA,
    "sinhala": Script.SINHALA,
    "tamil": Script.TAMIL,
    "telugu": Script.TELUGU,
    "thai": Script.THAI,
}

# Keys are casefolded ISO 639-1 codes (langdetect labels) and ISO 639-3 codes.
LANGUAGE_LABELS: Mapping[str, Language] = {
    "af": Language.AFR,
    "afr": Language.AFR,
    "ak": Language.AKA,
    "aka": Language.AKA,
    "am": Language.AMH,
    "amh": Language.AMH,
    "ar": Language.ARA,
    "ara": Language.ARA,
    "az": Language.AZE,
    "aze": Language.AZE,
    "be": Language.BEL,
    "bel": Language.BEL,
    "bg": Language.BUL,
    "bul": Language.BUL,
    "bn": Language.BEN,
    "ben": Language.BEN,
    "ca": Language.CAT,
    "cat": Language.CAT,
    "cs": Language.CES,
    "ces": Language.CES,
    "da": Language.DAN,
    "dan": Language.DAN,
    "de": Language.DEU,
    "deu": Language.DEU,
    "el": Language.ELL,
    "ell": Language.ELL,
    "en": Language.ENG,
    "eng": Language.ENG,
    "eo": Language.EPO,
    "epo": Language.EPO,
    "es": Language.SPA,
    "spa": Language.SPA,
    "et": Language.EST,
    "est": Language.EST,
    "fa": Language.PES,
    "pes": Language.PES,
    "fi": Language.FIN,
    "fin": Language.FIN,
    "fr": Language.FRA,
    "fra": Language.FRA,
    "gu": Language.GUJ,
    "guj": Language.GUJ,
    "he": Language.HEB,
    "heb": Language.HEB,
    "hi": Language.HIN,
    "hin": Language.HIN,
    "hr": Language.HRV,
    "hrv": Language.HRV,
    "hu": Language.HUN,
    "hun": Language.HUN,
    "id": Language.IND,
    "ind": Language.IND,
    "it": Language.ITA,
    "ita": Language.ITA,
    "ja": Language.JPN,
    "jpn": Language.JPN,
    "jv": Language.JAV,
    "jav": Language.JAV,
    "ka": Language.KAT,
    "kat": Language.KAT,
    "km": Language.KHM,
    "khm": Language.KHM,
    "kn": Language.KAN,
    "kan": Language.KAN,
    "ko": Language.KOR,
    "kor": Language.KOR,
    "la": Language.LAT,
    "lat": Language.LAT,
    "lt": Language.LIT,
    "lit": Language.LIT,
    "lv": Language.LAV,
    "lav": Language.LAV,
    "mk": Language.MKD,
    "mkd": Language.MKD,
    "ml": Language.MAL,
    "mal": Language.MAL,
    "mr": Language.MAR,
    "mar": Language.MAR,
    "my": Language.MYA,
    "mya": Language.MYA,
    "nb": Language.NOB,
    "no": Language.NOB,
    "nob": Language.NOB,
    "ne": Language.NEP,
    "nep": Language.NEP,
    "nl": Language.NLD,
    "nld": Language.NLD,
    "or": Language.ORI,
    "ori": Language.ORI,
    "pa": Language.PAN,
    "pan": Language.PAN,
    "pl": Language.POL,
    "pol": Language.POL,
    "pt": Language.POR,
    "por": Language.POR,
    "ro": Language.RON,
    "ron": Language.RON,
    "ru": Language.RUS,
    "rus": Language.RUS,
    "si": Language.SIN,
    "sin": Language.SIN,
    "sk": Language.SLK,
    "slk": Language.SLK,
    "sl": Language.SLV,
    "slv": Language.SLV,
    "sn": Language.SNA,
    "sna": Language.SNA,
    "sr": Language.SRP,
    "srp": Language.SRP,
    "sv": Language.SWE,
    "swe": Language.SWE,
    "ta": Language.TAM,
    "tam": Language.TAM,
    "te": Language.TEL,
    "tel": Language.TEL,
    "th": Language.THA,
    "tha": Language.THA,
    "tk": Language.TUK,
    "tuk": Language.TUK,
    "tl": Language.TGL,
    "tgl": Language.TGL,
    "tr": Language.TUR,
    "tur": Language.TUR,
    "uk": Language.UKR,
    "ukr": Language.UKR,
    "ur": Language.URD,
    "urd": Language.URD,
    "uz": Language.UZB,
    "uzb": Language.UZB,
    "vi": Language.VIE,
    "vie": Language.VIE,
    "yi": Language.YID,
    "yid": Language.YID,
    "zh-cn": Language.CMN,
    "zh-tw": Language.CMN,
    "zh": Language.CMN,
    "cmn": Language.CMN,
    "zu": Language.ZUL,
    "zul": Language.ZUL,
}

# Includes scripts outside `Script`; their labels narrow to `OTHER`.
_CANDIDATE_SCRIPTS = (
    "Latin",
    "Cyrillic",
    "Greek",
    "Arabic",
    "Hebrew",
    "Han",
    "Hiragana",
    "Katakana",
    "Hangul",
    "Devanagari",
    "Bengali",
    "Gurmukhi",
    "Gujarati",
    "Oriya",
    "Tamil",
    "Telugu",
    "Kannada",
    "Malayalam",
    "Sinhala",
    "Thai",
    "Khmer",
    "Myanmar",
    "Georgian",
    "Ethiopic",
    "Armenian",
    "Thaana",
    "Tibetan",
    "Mongolian",
    "Lao",
    "Syriac",
    "Cherokee",
)

_SCRIPT_RE = regex.compile(
    "|".join(f"(?P<{name}>\\p{{Script={name}}})" for name in _CANDIDATE_SCRIPTS)
)


class TextClassifier(Protocol):
    """External classifier returning open-set labels, or `None` without signal."""

    def script_label(self, text: str) -> str | None:
        """Return the dominant script label for text."""

    def language_label(self, text: str) -> str | None:
        """Return the most probable language label for text."""


class DefaultTextClassifier:
    """Statistical classifier backed by `regex` script properties and `langdetect`.

    Script detection counts code points per Unicode script and returns the
    dominant one; ties resolve to candidate order. Language detection keeps the
    top `langdetect` guess only when its probability reaches
    `min_language_probability`.
    """

    def __init__(self, min_language_probability: float = 0.5) -> None:
        """Initialize classifier thresholds and seed `langdetect` for repeatable output."""

        self.min_language_probability = min_language_probability
        DetectorFactory.seed = 0

    def script_label(self, text: str) -> str | None:
        counts: dict[str, int] = {}
        for match in _SCRIPT_RE.finditer(text):
            name = match.lastgroup
            if name is not None:
                counts[name] = counts.get(name, 0) + 1
        if not counts:
            return None
        best = max(counts.values())
        return next(name for name in _CANDIDATE_SCRIPTS if counts.get(name) == best)

    def language_label(self, text: str) -> str | None:
        try:
            guesses = detect_langs(text)
        except LangDetectException:
            return None
        if not guesses:
            return None
        top = guesses[0]
        if top.prob < self.min_language_probability:
            return None
        return top.lang


@lru_cache(maxsize=None)
def default_classifier(min_language_probability: float = 0.5) -> DefaultTextClassifier:
    """Return a shared default classifier for the given language threshold."""

    return DefaultTextClassifier(min_language_probability=min_language_probability)


def script_from_label(label: str | None) -> Script:
    """Narrow an open-set script label into `Script`, defaulting to `OTHER`."""

    if label is None:
        return Script.OTHER
    return SCRIPT_LABELS.get(label.strip().casefold(), Script.OTHER)


def language_from_label(label: str | None) -> Language:
    """Narrow an open-set language label into `Language`, defaulting to `OTHER`."""

    if label is None:
        return Language.OTHER
    return LANGUAGE_LABELS.get(label.strip().casefold(), Language.OTHER)


def detect_script(text: str, classifier: TextClassifier | None = None) -> Script:
    """Detect the script of text; empty or unidentifiable text yields `Script.OTHER`."""

    if not text.strip():
        return Script.OTHER
    active = classifier if classifier is not None else default_classifier()
    return script_from_label(active.script_label(text))


def detect_language(text: str, classifier: TextClassifier | None = None) -> Language:
    """Detect the language of text; no confident result yields `Language.OTHER`."""

    if not text.strip():
        return Language.OTHER
    active = classifier if classifier is not None else default_classifier()
    return language_from_label(active.language_label(text))


class SpanDetection:
    """Lazy, memoized script and language for one original text span.

    Every token derived from the same span shares one instance, so the
    classifier runs at most once per tag and span. Reading `script` never
    triggers language classification.
    """

    __slots__ = ("_text", "_classifier", "_script", "_language")

    def __init__(
        self,
        text: str,
        classifier: TextClassifier | None = None,
        *,
        script: Script | None = None,
        language: Language | None = None,
    ) -> None:
        self._text = text
        self._classifier = classifier
        self._script = script
        self._language = language

    @property
    def text(self) -> str:
        return self._text

    @property
    def script(self) -> Script:
        if self._script is None:
            self._script = detect_script(self._text, self._classifier)
        return self._script

    @property
    def language(self) -> Language:
        if self._language is None:
            self._language = detect_language(self._text, self._classifier)
        return self._language

    @property
    def script_if_detected(self) -> Script | None:
        return self._script

    @property
    def language_if_detected(self) -> Language | None:
        return self._language

    def __repr__(self) -> str:
        script = self._script.value if self._script is not None else "?"
        language = self._language.value if self._language is not None else "?"
        return f"SpanDetection(script={script}, language={language})"
