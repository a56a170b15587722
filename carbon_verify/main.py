import argparse
import json
import signal
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

from carbon_verify.automation.exceptions import AutomationError
from carbon_verify.automation.runner import AutomationRunner, capture_auth_state
from carbon_verify.config.settings import Settings
from carbon_verify.extraction.exceptions import ExtractionConfigError
from carbon_verify.intake.exceptions import IntakeError
from carbon_verify.intake.file_intake import load_uploaded_file
from carbon_verify.intake.models import IntakePolicy
from carbon_verify.ledger.exceptions import LedgerError
from carbon_verify.ledger.ledger import SimulatedLedger, build_proof, write_proof
from carbon_verify.logging.logger import Log
from carbon_verify.processor.cancellation import CancellationToken
from carbon_verify.processor.exceptions import ProcessorError
from carbon_verify.processor.processor import build_processor
from carbon_verify.processor.sequencer import ProgressSnapshot
from carbon_verify.reports.exceptions import ReportError


def _print_progress(snapshot: ProgressSnapshot) -> None:
    Log.info(f"[{snapshot.progress_percent:3d}%] {snapshot.label}")


@contextmanager
def _cancel_on_interrupt(token: CancellationToken) -> Iterator[None]:
    """Route Ctrl-C to *token* so pending delays abort cleanly."""
    previous = signal.signal(signal.SIGINT, lambda *_: token.cancel())
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def process_command(args: argparse.Namespace, settings: Settings) -> int:
    policy = IntakePolicy.PER_IMAGE if args.image else IntakePolicy.WHOLE_DOCUMENT
    token = CancellationToken()
    try:
        processor = build_processor(settings, policy=policy, listener=_print_progress)
        file = load_uploaded_file(Path(args.file), mime_type=args.mime_type)
        with _cancel_on_interrupt(token):
            outcome = processor.process(file, token=token)
            output: dict[str, object] = {"outcome": outcome.to_dict()}
            if args.commit:
                ledger = SimulatedLedger.from_settings(settings)
                record = ledger.commit(outcome.result, token=token)
                output["transaction"] = record.to_dict()
                output["explorerUrl"] = ledger.explorer_url(record)
                if args.proof_dir:
                    proof = build_proof(record, outcome.result, ledger.network)
                    output["proofPath"] = str(write_proof(proof, Path(args.proof_dir)))
    except (
        ExtractionConfigError,
        IntakeError,
        ProcessorError,
        LedgerError,
        OSError,
    ) as exc:
        Log.error(str(exc))
        return 1
    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


def serve_command(args: argparse.Namespace, settings: Settings) -> int:
    import uvicorn

    from carbon_verify.api.server import create_app

    uvicorn.run(create_app(settings), host=settings.api_host, port=settings.api_port)
    return 0


def automation_command(args: argparse.Namespace, settings: Settings) -> int:
    try:
        if args.automation_action == "login":
            capture_auth_state(settings)
            return 0
        summary = AutomationRunner(settings).run(args.project_id)
    except (AutomationError, ReportError) as exc:
        Log.error(str(exc))
        return 1
    print(json.dumps(summary, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="carbon-verify",
        description="Carbon-credit project document verification",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    process = commands.add_parser("process", help="Extract the project documents in FILE")
    process.add_argument("file")
    process.add_argument("--image", action="store_true", help="Use the per-image flow")
    process.add_argument("--mime-type", help="Override the MIME type guessed from FILE")
    process.add_argument("--commit", action="store_true", help="Simulate the ledger commit")
    process.add_argument("--proof-dir", help="Write the commit proof JSON here")
    process.set_defaults(handler=process_command)

    serve = commands.add_parser("serve", help="Run the automation API")
    serve.set_defaults(handler=serve_command)

    automation = commands.add_parser("automation", help="Browser automation")
    actions = automation.add_subparsers(dest="automation_action", required=True)
    run = actions.add_parser("run", help="Replay the walkthrough for PROJECT_ID")
    run.add_argument("project_id")
    actions.add_parser("login", help="Capture the browser session used by 'run'")
    automation.set_defaults(handler=automation_command)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: load settings -> configure logging -> dispatch command."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    return args.handler(args, settings)


if __name__ == "__main__":
    sys.exit(main())
