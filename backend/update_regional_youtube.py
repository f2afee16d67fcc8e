import sys
from typing import List, Mapping, Optional, Sequence, Tuple

from pymongo import MongoClient

from cli_common import run_tool
from errors import UsageError
from languages import REGIONAL_LANGUAGES, language_name, regional_video_path
from slug_updater import update_by_slug


def _usage() -> str:
    codes = ", ".join(REGIONAL_LANGUAGES)
    table = "\n".join(f"  - {code}: {name}" for code, name in REGIONAL_LANGUAGES.items())
    return f"""
Usage: update-regional-youtube <language> <slug> <youtube_link>

Example:
update-regional-youtube ta fpktnk.json https://www.youtube.com/watch?v=example

Parameters:
  - language: Required. The language code (e.g., {codes})
  - slug: Required. The unique identifier for the document (e.g., fpktnk.json)
  - youtube_link: Required. The new YouTube video link

Supported language codes:
{table}
"""


USAGE = _usage()


def parse_args(args: Sequence[str]) -> Tuple[str, str, str, str]:
    """Return (language, language_name, slug, youtube_link) or raise UsageError.

    The language code is checked against REGIONAL_LANGUAGES here, before any
    connection to MongoDB is opened.
    """
    if not args or args[0] in ("-h", "--help") or len(args) < 3:
        raise UsageError()

    language, slug, link = args[0], args[1], args[2]
    name = language_name(language)
    if not slug or not link:
        raise UsageError("Slug and YouTube link are required")
    return language, name, slug, link


def main(
    argv: Optional[List[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    client_factory=MongoClient,
) -> int:
    def run(config, parsed):
        language, name, slug, link = parsed
        print(f"Processing language: {language} ({name})")
        print(f"Processing slug: {slug}")
        print(f"New YouTube link: {link}")
        return update_by_slug(
            config,
            slug,
            regional_video_path(language),
            link,
            label=f"{language}.media.video",
            title="YouTube link",
            client_factory=client_factory,
        )

    return run_tool(argv, environ, parse_args, USAGE, run)


if __name__ == "__main__":
    sys.exit(main())
