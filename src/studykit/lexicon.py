from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet
import re

import structlog

log = structlog.get_logger(__name__)

DEFAULT_LANGUAGE = "en"


class Script(str, Enum):
    LATIN = "latin"  # split on . ! ? before an uppercase letter
    LOGOGRAPHIC = "logographic"  # split on 。！？, one token per character


@dataclass(frozen=True)
class LanguageProfile:
    """Everything language-specific the engine needs, looked up once per call."""

    tag: str
    script: Script
    stop_words: FrozenSet[str]
    definition_pattern: re.Pattern
    templates: Dict[str, str] = field(default_factory=dict)

    @property
    def logographic(self) -> bool:
        return self.script is Script.LOGOGRAPHIC

    def t(self, key: str) -> str:
        return self.templates[key]


# ---------- stop words ----------

_STOP_EN = frozenset(
    """a an the and or but is are was were of in on to with by for it this that these those
    as at from which who what where when how can will be has have had do does did not we you
    they he she i my your their his her its about into through during before after above below
    between under up down out off over again further then once here there why all any both each
    few more most other some such no nor only own same so than too very just should now also
    use used using uses""".split()
)

_STOP_ES = frozenset(
    """el la los las un una unos unas y o pero si de en a con por para es son fue fueron que
    se su sus lo al del como más este esta ese esa esos esas todo toda todos todas muy sin sobre
    entre ya cuando donde quien porque está están ser haber hacer también además así entonces
    luego bien aunque esto eso aquello mi mis tu tus nos vos ellos ellas""".split()
)

_STOP_FR = frozenset(
    """le la les un une des et ou mais si de en à avec par pour est sont été que qui ce se sa
    ses son du au aux comme plus tout toute très sans sur entre quand où car il elle ils elles
    ne pas avoir être faire cette ces aussi ainsi donc""".split()
)

_STOP_DE = frozenset(
    """der die das den dem des und oder aber wenn von in zu mit durch für ist sind war waren
    dass sich ihr ihre sein seine wie als mehr alle sehr ohne über unter zwischen wann wo wer
    warum weil es sie er wir nicht haben werden können auch dann damit""".split()
)

_STOP_PT = frozenset(
    """o a os as um uma uns umas e ou mas se de em com por para é são foi foram que seu sua
    seus suas do da ao como mais este esta esse essa todo toda muito sem sobre entre quando
    onde quem porque está estão ser ter fazer também assim então""".split()
)

_STOP_ZH = frozenset(
    ["的", "了", "在", "是", "我", "有", "和", "就", "不", "人", "都", "一", "一个", "上",
     "也", "很", "到", "说", "要", "去", "你", "会", "着", "没有", "看", "好", "自己", "这",
     "那", "个", "为", "之"]
)


# ---------- definition shapes ----------
# group 1: term, group 2: marker, group 3: definition.
# Longer markers come first so "is defined as" wins over "is".
# A bare copula only counts when an article follows it ("X is a Y", not "X is blue").
# Articles stay with the definition: "X is the Y" -> back "The Y".

_TERM = r"^([^\W\d_][\w\s-]{2,30}?)"


def _definition(markers: str) -> re.Pattern:
    return re.compile(_TERM + r"(" + markers + r")(.+)", re.IGNORECASE | re.DOTALL)


_DEF_EN = _definition(r":| is defined as | refers to | defined as | is (?=(?:a|an|the) )")
_DEF_ES = _definition(r":| se define como | se refiere a | es (?=(?:un|una|el|la) )")
_DEF_FR = _definition(r":| se définit comme | désigne | est (?=(?:un|une|le|la) |l')")
_DEF_DE = _definition(r":| wird definiert als | definiert als | bezeichnet | ist (?=(?:ein|eine|der|die|das) )")
_DEF_PT = _definition(r":| é definido como | definido como | refere-se a | é (?=(?:um|uma|o|a) )")
_DEF_ZH = re.compile(r"^([^\s:：]{2,10}?)([:：]|是指|定义为|是)(.+)", re.DOTALL)


# ---------- localized output strings ----------

_TEMPLATES: Dict[str, Dict[str, str]] = {
    "en": {
        "fill_blank": 'Fill in the blank: "{0}"',
        "context_category": "Context",
        "definition_category": "Definition",
        "plan_title": "Structured Study Roadmap",
        "plan_goal": "Master the core vocabulary and concepts extracted from your text.",
        "plan_fallback": "Review content.",
        "key_takeaways": "**Key Takeaways (Extracted):**",
        "chat_catch": "I didn't catch that. Could you please ask a more specific question about the text?",
        "chat_intro": "Hello! I'm ready to help you study your uploaded notes.",
        "chat_ref": 'Based on your notes: "{0}"',
        "chat_no_ref": "I couldn't find a specific reference to that in the text. Try using keywords from your document.",
        "chat_suggest": 'I suggest checking the Simplify tab, but here is a key thought: "{0}"',
    },
    "es": {
        "fill_blank": 'Completa el espacio: "{0}"',
        "context_category": "Contexto",
        "definition_category": "Definición",
        "plan_title": "Hoja de Ruta de Estudio Estructurada",
        "plan_goal": "Dominar el vocabulario y los conceptos clave extraídos de su texto.",
        "plan_fallback": "Repasar el contenido.",
        "key_takeaways": "**Puntos Clave (Extraídos):**",
        "chat_catch": "No entendí eso. ¿Podrías hacer una pregunta más específica sobre el texto?",
        "chat_intro": "¡Hola! Estoy listo para ayudarte a estudiar tus notas.",
        "chat_ref": 'Basado en tus notas: "{0}"',
        "chat_no_ref": "No encontré una referencia específica a eso en el texto. Intenta usar palabras clave de tu documento.",
        "chat_suggest": 'Sugiero revisar la pestaña Simplificar, pero aquí hay una idea clave: "{0}"',
    },
    "fr": {
        "fill_blank": 'Remplissez le vide : "{0}"',
        "context_category": "Contexte",
        "definition_category": "Définition",
        "plan_title": "Feuille de Route d'Étude Structurée",
        "plan_goal": "Maîtriser le vocabulaire de base et les concepts extraits de votre texte.",
        "plan_fallback": "Revoir le contenu.",
        "key_takeaways": "**Points Clés (Extraits) :**",
        "chat_catch": "Je n'ai pas saisi. Pourriez-vous poser une question plus précise sur le texte ?",
        "chat_intro": "Bonjour ! Je suis prêt à vous aider à étudier vos notes.",
        "chat_ref": 'Basé sur vos notes : "{0}"',
        "chat_no_ref": "Je n'ai pas trouvé de référence spécifique à cela dans le texte. Essayez d'utiliser des mots-clés de votre document.",
        "chat_suggest": "Je suggère de vérifier l'onglet Simplifier, mais voici une idée clé : \"{0}\"",
    },
    "de": {
        "fill_blank": 'Füllen Sie die Lücke: "{0}"',
        "context_category": "Kontext",
        "definition_category": "Definition",
        "plan_title": "Strukturierter Lernplan",
        "plan_goal": "Beherrschen Sie das Kernvokabular und die Konzepte aus Ihrem Text.",
        "plan_fallback": "Inhalt wiederholen.",
        "key_takeaways": "**Wichtige Erkenntnisse (Extrahiert):**",
        "chat_catch": "Das habe ich nicht verstanden. Könnten Sie bitte eine spezifischere Frage zum Text stellen?",
        "chat_intro": "Hallo! Ich bin bereit, Ihnen beim Lernen Ihrer Notizen zu helfen.",
        "chat_ref": 'Basierend auf Ihren Notizen: "{0}"',
        "chat_no_ref": "Ich konnte im Text keinen spezifischen Hinweis darauf finden. Versuchen Sie es mit Schlüsselwörtern aus Ihrem Dokument.",
        "chat_suggest": 'Ich schlage vor, den Tab Vereinfachen zu prüfen, aber hier ist ein wichtiger Gedanke: "{0}"',
    },
    "pt": {
        "fill_blank": 'Preencha a lacuna: "{0}"',
        "context_category": "Contexto",
        "definition_category": "Definição",
        "plan_title": "Roteiro de Estudo Estruturado",
        "plan_goal": "Dominar o vocabulário e conceitos fundamentais extraídos do seu texto.",
        "plan_fallback": "Revisar o conteúdo.",
        "key_takeaways": "**Principais Pontos (Extraídos):**",
        "chat_catch": "Não entendi. Poderia fazer uma pergunta mais específica sobre o texto?",
        "chat_intro": "Olá! Estou pronto para ajudar você a estudar suas anotações.",
        "chat_ref": 'Com base em suas anotações: "{0}"',
        "chat_no_ref": "Não encontrei uma referência específica a isso no texto. Tente usar palavras-chave do seu documento.",
        "chat_suggest": 'Sugiro verificar a aba Simplificar, mas aqui está um pensamento chave: "{0}"',
    },
    "zh": {
        "fill_blank": '填空："{0}"',
        "context_category": "语境",
        "definition_category": "定义",
        "plan_title": "结构化学习路线图",
        "plan_goal": "掌握从文本中提取的核心词汇和概念。",
        "plan_fallback": "复习内容。",
        "key_takeaways": "**主要要点（摘录）：**",
        "chat_catch": "我没听懂。请问您能问一个关于文本的具体问题吗？",
        "chat_intro": "你好！我准备好帮您学习上传的笔记了。",
        "chat_ref": '根据您的笔记："{0}"',
        "chat_no_ref": "我在文中找不到具体的参考。尝试使用文档中的关键词。",
        "chat_suggest": '我建议查看简化标签，但这是一个关键想法："{0}"',
    },
}


PROFILES: Dict[str, LanguageProfile] = {
    "en": LanguageProfile("en", Script.LATIN, _STOP_EN, _DEF_EN, _TEMPLATES["en"]),
    "es": LanguageProfile("es", Script.LATIN, _STOP_ES, _DEF_ES, _TEMPLATES["es"]),
    "fr": LanguageProfile("fr", Script.LATIN, _STOP_FR, _DEF_FR, _TEMPLATES["fr"]),
    "de": LanguageProfile("de", Script.LATIN, _STOP_DE, _DEF_DE, _TEMPLATES["de"]),
    "pt": LanguageProfile("pt", Script.LATIN, _STOP_PT, _DEF_PT, _TEMPLATES["pt"]),
    "zh": LanguageProfile("zh", Script.LOGOGRAPHIC, _STOP_ZH, _DEF_ZH, _TEMPLATES["zh"]),
}

SUPPORTED_LANGUAGES = tuple(PROFILES)


def _primary(lang: str | None) -> str:
    # "zh-CN" / "pt_BR" -> "zh" / "pt"
    return (lang or "").strip().lower().replace("_", "-").split("-")[0]


def is_supported(lang: str | None) -> bool:
    return _primary(lang) in PROFILES


def get_profile(lang: str | LanguageProfile | None) -> LanguageProfile:
    """Resolve a language tag; anything unknown falls back to English."""
    if isinstance(lang, LanguageProfile):
        return lang
    profile = PROFILES.get(_primary(lang))
    if profile is None:
        log.info("language_fallback", requested=lang, using=DEFAULT_LANGUAGE)
        return PROFILES[DEFAULT_LANGUAGE]
    return profile
