from typing import Dict, List


LANGUAGE_NAMES: Dict[str, str] = {
    "en": "English",
    "he": "Hebrew",
    "ar": "Arabic",
    "fr": "French",
    "es": "Spanish",
    "de": "German",
}


RIDDLE_PROMPTS: Dict[str, str] = {
    "en": """Create a riddle for the word "{word}".

CRITICAL REQUIREMENTS:
- The riddle MUST describe the word's actual meaning, function, or characteristics
- Use clear, descriptive language that helps players deduce the answer logically
- AVOID wordplay, puns, letter counting, rhymes, or cryptic metaphors
- Keep the riddle concise (8-15 words) but informative
- The hint should provide additional context or a different angle (5-10 words)
- The explanation should clarify why the answer fits the riddle (10-25 words)

EXAMPLES OF GOOD RIDDLES:
- For "TREE": "A tall plant with a woody trunk, branches, and leaves"
- For "BOOK": "Bound pages containing written or printed text for reading"
- For "RAIN": "Water falling from clouds in drops to the ground"

Respond ONLY with valid JSON in this exact format (no markdown, no extra text):
{{
  "riddle": "your clear, descriptive riddle here",
  "hint": "your helpful hint here",
  "explanation": "your explanation of why this answer is correct"
}}""",
    "he": """צור חידה למילה "{word}".

דרישות קריטיות:
- החידה חייבת לתאר את המשמעות, התפקיד או המאפיינים האמיתיים של המילה
- השתמש בשפה ברורה ותיאורית שעוזרת לשחקנים להסיק את התשובה באופן לוגי
- הימנע מחרוזים, ספירת אותיות או מטאפורות מסתוריות
- שמור על החידה תמציתית (8-15 מילים) אך אינפורמטיבית
- הרמז צריך לספק הקשר נוסף או זווית שונה (5-10 מילים)
- ההסבר צריך להבהיר למה התשובה מתאימה לחידה (10-25 מילים)

השב רק עם JSON תקין בפורמט הזה בדיוק (ללא markdown, ללא טקסט נוסף):
{{
  "riddle": "החידה הברורה והתיאורית שלך כאן",
  "hint": "הרמז המועיל שלך כאן",
  "explanation": "ההסבר שלך למה התשובה הזו נכונה"
}}""",
}


FALLBACK_TEMPLATES: Dict[str, List[Dict[str, str]]] = {
    "en": [
        {
            "riddle": "A four-letter word that starts with {0} and ends with {3}",
            "hint": "Think of common words with these letters",
            "explanation": 'The word "{word}" matches the pattern with {0} at the start and {3} at the end',
        },
        {
            "riddle": "Find the word: {0}_{2}_",
            "hint": "The missing letters are {1} and {3}",
            "explanation": 'Filling in the blanks gives you "{word}"',
        },
        {
            "riddle": 'This word begins with "{0}" and contains "{1}"',
            "hint": "Look for the pattern {0}{1}",
            "explanation": 'The word "{word}" starts with {0} and has {1} as the second letter',
        },
        {
            "riddle": "A word with letters {0}, {1}, {2}, {3}",
            "hint": "These letters appear in this exact order",
            "explanation": 'The letters spell out "{word}" when arranged in sequence',
        },
    ],
    "he": [
        {
            "riddle": "מילה בת ארבע אותיות שמתחילה ב-{0} ומסתיימת ב-{3}",
            "hint": "חשוב על מילים נפוצות עם האותיות האלה",
            "explanation": 'המילה "{word}" מתאימה לתבנית עם {0} בהתחלה ו-{3} בסוף',
        },
        {
            "riddle": "מצא את המילה: {0}_{2}_",
            "hint": "האותיות החסרות הן {1} ו-{3}",
            "explanation": 'מילוי החסר נותן לך "{word}"',
        },
        {
            "riddle": 'מילה זו מתחילה ב-"{0}" ומכילה "{1}"',
            "hint": "חפש את התבנית {0}{1}",
            "explanation": 'המילה "{word}" מתחילה ב-{0} ויש לה {1} כאות שנייה',
        },
        {
            "riddle": "מילה עם האותיות {0}, {1}, {2}, {3}",
            "hint": "האותיות האלה מופיעות בסדר הזה בדיוק",
            "explanation": 'האותיות מרכיבות את "{word}" כשמסודרות ברצף',
        },
    ],
}


def build_riddle_prompt(word: str, language: str = "en") -> str:
    """Build the user prompt asking for a riddle about `word`."""
    template = RIDDLE_PROMPTS.get(language, RIDDLE_PROMPTS["en"])
    return template.format(word=word)


def fallback_template(word: str, language: str = "en", index: int = 0) -> Dict[str, str]:
    """
    Template riddle for `word`, cycling through the language's templates by index.

    Used when no model is configured or the model's reply is unusable.
    """
    templates = FALLBACK_TEMPLATES.get(language, FALLBACK_TEMPLATES["en"])
    template = templates[index % len(templates)]
    letters = list(word)
    return {key: text.format(*letters, word=word) for key, text in template.items()}
