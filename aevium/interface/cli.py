"""Command-line entry points.

    aevium subscribe-link [LEARNER_KEY]
    aevium benefit-grant LEARNER_KEY [PROGRAM] [LEVEL]

Configuration comes from the environment (see aevium.config.Settings).
"""

import argparse
import asyncio
import json
import sys

import logfire

from aevium.adapter.error import LedgerError, LedgerResponseError
from aevium.application.usecase.claim import (
    GenerateSubscribeLinkRequest,
    GenerateSubscribeLinkUseCase,
)
from aevium.application.usecase.grant import (
    CreateGrantRequest,
    CreateGrantUseCase,
    GetGrantRequest,
    GetGrantUseCase,
)
from aevium.config import Settings
from aevium.domain.error import DomainError
from aevium.util.di.container import create_container
from aevium.util.entropy import EntropySource
from aevium.util.error import ConfigurationError
from aevium.util.logging import setup_logging

LEARNER_KEY_BYTES = 16


async def subscribe_link(args: argparse.Namespace) -> int:
    """Print a signed subscribe link for a learner."""
    container = create_container(with_fastapi=False)
    try:
        async with container() as request_container:
            settings = await request_container.get(Settings)
            learner_key = args.learner_key
            if not learner_key:
                entropy = await request_container.get(EntropySource)
                learner_key = entropy.token_hex(LEARNER_KEY_BYTES)

            print(
                "Generating subscribe link with the following parameters:",
                json.dumps(
                    {
                        "base_url": settings.invitation.base_url,
                        "partner": settings.invitation.partner,
                        "fields": settings.invitation.fields,
                        "learner_key": learner_key,
                    }
                ),
                file=sys.stderr,
            )

            use_case = await request_container.get(GenerateSubscribeLinkUseCase)
            response = await use_case.execute(
                GenerateSubscribeLinkRequest(learner_key=learner_key)
            )
            print(response.link)
            return 0
    finally:
        await container.close()


async def benefit_grant(args: argparse.Namespace) -> int:
    """Create a 30-day grant for a learner, then fetch it back."""
    container = create_container(with_fastapi=False)
    try:
        async with container() as request_container:
            create_use_case = await request_container.get(CreateGrantUseCase)
            try:
                grant = await create_use_case.execute(
                    CreateGrantRequest(
                        learner_key=args.learner_key,
                        program=args.program,
                        level=args.level,
                    )
                )
            except (DomainError, LedgerError) as e:
                _report("Failed to create grant", e)
                return 1
            print(f"Created grant {grant.uid}")

            print("\nFetching grant...")
            get_use_case = await request_container.get(GetGrantUseCase)
            try:
                confirmed = await get_use_case.execute(GetGrantRequest(uid=grant.uid))
            except (DomainError, LedgerError) as e:
                _report("Failed to fetch grant", e)
                return 1
            print("Confirmed existence of grant:", confirmed.model_dump_json(indent=2))
            return 0
    finally:
        await container.close()


def _report(message: str, error: Exception) -> None:
    if isinstance(error, LedgerResponseError):
        detail = json.dumps(
            {"status": error.status_code, "error": error.error}, indent=2
        )
    else:
        detail = str(error)
    print(f"{message}: {detail}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(prog="aevium")
    subparsers = parser.add_subparsers(dest="command", required=True)

    link_parser = subparsers.add_parser(
        "subscribe-link", help="Print a signed subscribe link"
    )
    link_parser.add_argument(
        "learner_key", nargs="?", help="Learner key (random when omitted)"
    )
    link_parser.set_defaults(handler=subscribe_link)

    grant_parser = subparsers.add_parser(
        "benefit-grant", help="Create a 30-day benefit grant and confirm it"
    )
    grant_parser.add_argument("learner_key")
    grant_parser.add_argument("program", nargs="?")
    grant_parser.add_argument("level", nargs="?")
    grant_parser.set_defaults(handler=benefit_grant)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI."""
    args = build_parser().parse_args(argv)

    setup_logging(Settings())
    logfire.configure(send_to_logfire=False, console=False)

    try:
        return asyncio.run(args.handler(args))
    except (ConfigurationError, DomainError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
