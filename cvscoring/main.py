import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from cvscoring.analysis.exceptions import AnalysisError
from cvscoring.config.settings import Settings
from cvscoring.database.connection import close_pool, init_pool
from cvscoring.logging.logger import Log
from cvscoring.profiles.factory import configured_sources
from cvscoring.scoring.exceptions import ScoringError
from cvscoring.service import CvAnalysisService, build_service


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cvscoring",
        description="CV analysis and compatibility scoring",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    analyze = commands.add_parser("analyze", help="analyze one application's CV")
    analyze.add_argument("application_id")
    analyze.add_argument("--file", type=Path, help="analyze this file instead of the stored CV")
    analyze.add_argument("--refresh", action="store_true", help="ignore the cached analysis")

    score = commands.add_parser("score", help="score an application against a job")
    score.add_argument("job_id")
    score.add_argument("application_id")

    enqueue = commands.add_parser("enqueue", help="analyze applications through the queue")
    enqueue.add_argument("application_ids", nargs="+")
    enqueue.add_argument("--refresh", action="store_true")
    return parser


def _run(service: CvAnalysisService, args: argparse.Namespace) -> dict[str, object]:
    if args.command == "analyze":
        if args.file is not None:
            result = service.analyze(
                args.application_id, args.file.read_bytes(), args.file.name, args.refresh
            )
            return {"result": result.to_dict()}
        outcome = service.analyze_stored(args.application_id, args.refresh)
        return {
            "cached": outcome.source == "cache",
            "source": outcome.source,
            "status": outcome.status,
            "result": outcome.result.to_dict(),
        }

    if args.command == "score":
        return service.compatibility(args.job_id, args.application_id).to_dict()

    with service.queue:
        jobs = [service.enqueue_analysis(app_id, args.refresh) for app_id in args.application_ids]
        service.queue.join()
    return {
        "jobs": [
            {"name": job.name, "status": job.status, "error": job.error_message}
            for job in jobs
        ]
    }


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: settings -> logging -> dependencies -> command."""
    args = _build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    use_database = "database" in configured_sources(settings)
    if use_database:
        init_pool(settings)
    try:
        service = build_service(settings)
        output = _run(service, args)
    except (AnalysisError, ScoringError) as exc:
        Log.error(str(exc))
        print(json.dumps({"error": str(exc)}), file=sys.stderr)
        return 1
    finally:
        if use_database:
            close_pool()

    print(json.dumps(output, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
