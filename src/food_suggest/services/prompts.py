"""Prompt and output schema for generative food recommendations."""

RECOMMENDATION_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "recommendation": {"type": "string"},
        "explanation": {"type": "string"},
        "foods": {"type": "array", "items": {"type": "string"}},
        "tips": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["recommendation", "explanation", "foods", "tips"],
    "additionalProperties": False,
}


def _diet_terms(preferences: dict[str, object] | None, language: str) -> list[str]:
    prefs = preferences or {}
    vegetarian = "vejetaryen" if language == "tr" else "vegetarian"
    terms: list[str] = []
    if prefs.get("isVegan"):
        terms.append("vegan")
    elif prefs.get("isVegetarian"):
        terms.append(vegetarian)
    if prefs.get("isGlutenFree"):
        terms.append("gluten-free")
    return terms


def build_recommendation_prompt(
    mood: dict[str, object],
    city: str | None,
    preferences: dict[str, object] | None,
    language: str,
) -> str:
    """Build the instruction asking for three mood-appropriate dishes."""
    terms = _diet_terms(preferences, language)
    label = mood.get("label", "")
    description = mood.get("description", "")
    if language == "tr":
        diet_text = ""
        if terms:
            diet_text = f"Kullanıcı {' ve '.join(terms)} beslenmeyi tercih ediyor."
        return (
            "Sen bir yemek öneri uzmanısın. Türk mutfağı ve dünya mutfağı hakkında "
            "derin bilgin var.\n\n"
            "Kullanıcı bilgileri:\n"
            f"- Ruh hali: {label} ({description})\n"
            f"- Konum: {city or 'Belirtilmedi'}\n"
            f"{diet_text}\n\n"
            "Görevin:\n"
            "1. Bu ruh haline uygun 3 yemek öner (Türk mutfağından en az 1 tane)\n"
            "2. Neden bu yemekleri önerdiğini kısaca açıkla\n"
            "3. Yemekle ilgili 2 pratik ipucu ver\n\n"
            "Yanıtı recommendation, explanation, foods ve tips alanları olan "
            "bir JSON nesnesi olarak ver."
        )
    diet_text = f"User prefers {' and '.join(terms)} diet." if terms else ""
    return (
        "You are a food suggestion expert. You have deep knowledge of Turkish and "
        "world cuisine.\n\n"
        "User Information:\n"
        f"- Mood: {label} ({description})\n"
        f"- Location: {city or 'Not specified'}\n"
        f"{diet_text}\n\n"
        "Your Task:\n"
        "1. Suggest 3 dishes suitable for this mood (at least 1 from Turkish cuisine)\n"
        "2. Briefly explain why you suggested these dishes\n"
        "3. Give 2 practical tips about the food\n\n"
        "Respond with a JSON object with recommendation, explanation, foods and "
        "tips fields."
    )
