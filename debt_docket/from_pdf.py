import sys
from dataclasses import replace
from pathlib import Path

from .config import DEFAULT_SETTINGS, Settings
from .extractor import MalformedEntryError
from .main import build_report, configure_logging
from .source import DocketUnavailableError


def run_from_pdf(pdf_path: Path, settings: Settings = DEFAULT_SETTINGS) -> None:
    if not pdf_path.exists():
        raise SystemExit(f"PDF not found: {pdf_path}")

    settings = replace(settings, pdf_path=pdf_path)
    df = build_report(pdf_path, settings)

    print(f"Report written to {settings.output_csv} ({len(df)} rows)")


def main() -> None:
    configure_logging()
    pdf_path = None
    if len(sys.argv) > 1:
        pdf_path = Path(sys.argv[1])
    else:
        pdf_path = DEFAULT_SETTINGS.pdf_path

    try:
        run_from_pdf(pdf_path)
    except (DocketUnavailableError, MalformedEntryError) as e:
        raise SystemExit(f"Report not written: {e}") from e


if __name__ == "__main__":
    main()
