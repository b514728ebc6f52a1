"""
Create a block device on a vRA server from the command line.

Usage:
    vra-block-device --name <name> --capacity-in-gb <size> \
        (--project-id <id> | --project-name <name>) [--description <text>] \
        [--persistent] [--encrypted] [--wait-for-completion] \
        [--completion-timeout <seconds>] [--force] [--verbose]

Example:
    vra-block-device --name disk1 --capacity-in-gb 10 --project-name GOLD --wait-for-completion

Env:
    VRA_SERVER, and VRA_API_TOKEN or VRA_REFRESH_TOKEN
"""

import argparse
import json
import logging
import sys
from typing import Callable, List, Optional
import httpx
from pydantic import ValidationError # type: ignore
from src.schemas.create_block_device_request import parse_block_device_request
from src.services.block_device_create import create_block_device
from src.utils.config import config
from src.utils.exceptions import InvalidVRAResponse, ProjectNotFound, VRAConnectionError
from src.utils.vra_utils import get_vra_connection

logger: logging.Logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="vra-block-device", description="Create a vRA block device")
    ap.add_argument("--name", required=True, help="Block device name")
    ap.add_argument("--capacity-in-gb", required=True, type=int, help="Capacity in GB")
    project = ap.add_mutually_exclusive_group(required=True)
    project.add_argument("--project-id", help="Id of the project to create the block device in")
    project.add_argument("--project-name", help="Name of the project to create the block device in")
    ap.add_argument("--description", default="", help="Block device description")
    ap.add_argument("--persistent", action="store_true", help="Keep the disk when its machine is deleted")
    ap.add_argument("--encrypted", action="store_true", help="Create an encrypted disk")
    ap.add_argument("--wait-for-completion", action="store_true", help="Wait until the request finishes")
    ap.add_argument("--completion-timeout", type=int, default=config.COMPLETION_TIMEOUT,
                    help="Seconds to wait for completion (default: %(default)s)")
    ap.add_argument("--force", action="store_true", help="Do not ask for confirmation")
    ap.add_argument("--verbose", action="store_true", help="Log request payloads")
    return ap

def confirm_creation(name: str, target: str, prompt: Callable[[str], str] = input) -> bool:
    """Ask the user to approve the creation. Anything but y/yes, or a closed stdin, declines."""
    try:
        answer = prompt(f"Create block device '{name}' in project {target}? [y/N]: ")
    except EOFError:
        # stdin closed, e.g. piped input without --force
        return False
    return answer.strip().lower() in ("y", "yes")

def main(argv: Optional[List[str]] = None, prompt: Callable[[str], str] = input) -> int:
    args = build_parser().parse_args(argv)

    level: int = logging.DEBUG if args.verbose else getattr(logging, config.LOG_LEVEL.upper())
    logging.basicConfig(
        level=level,
        format=config.LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    # basicConfig leaves the level alone when root already has handlers
    logging.getLogger().setLevel(level)

    params = {
        "name": args.name,
        "capacity_in_gb": args.capacity_in_gb,
        "description": args.description,
        "persistent": args.persistent,
        "encrypted": args.encrypted,
        "wait_for_completion": args.wait_for_completion,
        "completion_timeout": args.completion_timeout,
    }
    if args.project_id is not None:
        params["project_id"] = args.project_id
    else:
        params["project_name"] = args.project_name

    try:
        request = parse_block_device_request(params)
    except ValidationError as e:
        logger.error(f"Invalid parameters: {e}")
        return 1

    target = f"id '{args.project_id}'" if args.project_id is not None else f"'{args.project_name}'"
    confirmed: bool = args.force or confirm_creation(request.name, target, prompt)

    conn: httpx.Client | None = None
    try:
        if confirmed:
            conn = get_vra_connection()
        result = create_block_device(conn, request, confirmed=confirmed)
    except ProjectNotFound as e:
        logger.error(f"Operation failed: {e}")
        return 1
    except httpx.HTTPStatusError as e:
        logger.error(f"Operation failed: {e.response.status_code} {e.response.text}")
        return 1
    except (httpx.RequestError, VRAConnectionError, InvalidVRAResponse) as e:
        logger.error(f"Operation failed: {e}")
        return 1
    finally:
        if conn:
            conn.close()
            logger.debug("vRA session closed.")

    if result is None:
        return 0
    if isinstance(result, list):
        output = [disk.model_dump(by_alias=True) for disk in result]
    else:
        output = result.model_dump()
    print(json.dumps(output, indent=4))
    return 0

if __name__ == "__main__":
    sys.exit(main())
