#!/usr/bin/env python3
from pathlib import Path

from debt_docket.config import DEFAULT_SETTINGS
from debt_docket.extractor import MalformedEntryError
from debt_docket.from_pdf import run_from_pdf
from debt_docket.main import configure_logging, run as run_download
from debt_docket.source import DocketUnavailableError


def prompt_mode() -> str:
    print("Choose report mode:")
    print("1) Download the latest calendar")
    print("2) Build report from an existing PDF (no download)")
    choice = input("Select [1/2] (default 1): ").strip().lower()
    if choice in {"2", "pdf", "p"}:
        return "pdf"
    return "download"


def prompt_pdf_path(default_path: Path) -> Path:
    choice = input(f"PDF path [{default_path}]: ").strip()
    if not choice:
        return default_path
    return Path(choice)


def main() -> None:
    configure_logging()
    mode = prompt_mode()
    try:
        if mode == "download":
            run_download()
            return
        pdf_path = prompt_pdf_path(DEFAULT_SETTINGS.pdf_path)
        run_from_pdf(pdf_path)
    except (DocketUnavailableError, MalformedEntryError) as e:
        raise SystemExit(f"Report not written: {e}") from e


if __name__ == "__main__":
    main()
