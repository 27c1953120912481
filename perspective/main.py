import asyncio
import sys

from perspective.analysis.base import BaseRequester
from perspective.analysis.exceptions import AnalysisError
from perspective.analysis.factory import FilterFactory, RequesterFactory
from perspective.analysis.filter import ThresholdFilter
from perspective.config.settings import Settings
from perspective.logging.logger import Log


async def run(
    requester: BaseRequester,
    threshold_filter: ThresholdFilter,
    body: str,
    redact_body: bool,
) -> int:
    """Analyze one comment, print the report, return the exit status."""
    result = await requester.analyze(body)
    print(result.describe(redact_body=redact_body), end="")

    if threshold_filter.should_filter(result):
        reason = threshold_filter.last_filter_reason
        print(f"Filtered: {reason.value if reason else 'unknown'}")
        return 1
    print("Passed")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point: read settings -> analyze text from args or stdin -> report.

    Exit status: 0 passed, 1 filtered, 2 configuration or analysis failure.
    """
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)

    try:
        requester = RequesterFactory.create(settings)
        threshold_filter = FilterFactory.create(settings)
    except ValueError as exc:
        Log.error(f"Invalid configuration: {exc}")
        return 2

    args = sys.argv[1:] if argv is None else argv
    body = " ".join(args) if args else sys.stdin.read()

    try:
        return asyncio.run(
            run(requester, threshold_filter, body, settings.perspective_redact_body)
        )
    except AnalysisError as exc:
        Log.error(f"Analysis failed: {exc}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
