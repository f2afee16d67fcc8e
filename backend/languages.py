from typing import Dict

from errors import UsageError


# Regional editions that carry their own media.video link
REGIONAL_LANGUAGES: Dict[str, str] = {
    "te": "Telugu",
    "as": "Assamese",
    "kok": "Konkani",
    "gu": "Gujarati",
    "ml": "Malayalam",
    "mr": "Marathi",
    "mni": "Manipuri",
    "lus": "Mizo",
    "or": "Odia",
    "pa": "Punjabi",
    "ta": "Tamil",
    "bn": "Bengali",
    "ks": "Kashmiri",
    "kn": "Kannada",
}


def language_name(code: str) -> str:
    name = REGIONAL_LANGUAGES.get(code)
    if name is None:
        raise UsageError(f"Invalid language code '{code}'")
    return name


def regional_video_path(code: str) -> str:
    return f"data.{code}.media.video"
