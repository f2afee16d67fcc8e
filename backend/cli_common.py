import os
import sys
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple

from errors import ConfigError, StoreError, UsageError
from log_utils import log_error, logger, setup_logging
from store_config import StoreConfig, load_env_file, load_store_config


def run_tool(
    argv: Optional[List[str]],
    environ: Optional[Mapping[str, str]],
    parse_args: Callable[[Sequence[str]], Tuple[Any, ...]],
    usage: str,
    run: Callable[[StoreConfig, Tuple[Any, ...]], Any],
) -> int:
    """Shared body of the updater entry points. Returns the process exit status.

    Order: .env, logging, MONGO_URI, arguments, then `run(config, parsed)`.
    """
    if environ is None:
        load_env_file()
        environ = os.environ
    setup_logging()
    args = sys.argv[1:] if argv is None else list(argv)

    try:
        config = load_store_config(environ)
    except ConfigError as e:
        log_error("config_error", {"reason": str(e)})
        return 1

    try:
        parsed = parse_args(args)
    except UsageError as e:
        if e.message:
            logger.error(f"Error: {e.message}")
        print(usage)
        return 1

    try:
        run(config, parsed)
    except StoreError as e:
        log_error("store_error", {"operation": e.operation, "reason": e.detail})
        return 1
    return 0
