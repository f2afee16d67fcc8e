import sys
from typing import List, Mapping, Optional, Sequence, Tuple

from pymongo import MongoClient

from cli_common import run_tool
from errors import UsageError
from slug_updater import update_by_slug


FIELD_PATH = "data.en.application_link.value"

USAGE = """
Usage: update-application-link <slug> <application_link>

Example:
update-application-link fpktnk.json https://new-link.com

Parameters:
  - slug: Required. The unique identifier for the document (e.g., fpktnk.json)
  - application_link: Required. The new URL for the application link
"""


def parse_args(args: Sequence[str]) -> Tuple[str, str]:
    if not args or args[0] in ("-h", "--help") or len(args) < 2:
        raise UsageError()

    slug, link = args[0], args[1]
    if not slug or not link:
        raise UsageError("Slug and application link are required")
    return slug, link


def main(
    argv: Optional[List[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    client_factory=MongoClient,
) -> int:
    def run(config, parsed):
        slug, link = parsed
        print(f"Processing slug: {slug}")
        print(f"New application link: {link}")
        return update_by_slug(
            config,
            slug,
            FIELD_PATH,
            link,
            label="en.application_link.value",
            title="Application Link",
            client_factory=client_factory,
        )

    return run_tool(argv, environ, parse_args, USAGE, run)


if __name__ == "__main__":
    sys.exit(main())
