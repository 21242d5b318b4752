#!/usr/bin/env python3
"""
Score a resume for ATS compatibility.

Usage:
    # Score against the built-in keyword set, print text report
    python scripts/score_resume.py data/resumes/jane_doe.yaml

    # Score against a job description (path or identifier in JOBS_PATH)
    python scripts/score_resume.py jane_doe --job MLEng_AcmeCorp

    # Print feedback as JSON, or as an analysis record for a stored resume
    python scripts/score_resume.py jane_doe --json
    python scripts/score_resume.py jane_doe --record a1b2c3 --attempts-used 2
"""

import json
import os
import sys
import time
from pathlib import Path
from typing import Optional
from typing_extensions import Annotated

import typer
from dotenv import load_dotenv

from resumate.contexts.intake import InvalidResumeStructureError, load_job_description, load_resume
from resumate.contexts.scoring import analyze_resume, format_feedback_report
from resumate.contexts.scoring.logger import (
    log_analysis_result,
    log_analysis_start,
    setup_scoring_logger,
)
from resumate.contexts.tracking import (
    AtsAnalysisRecord,
    AttemptLimitExceededError,
    remaining_attempts,
)
from resumate.utils.timestamp import format_timestamp, now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    add_completion=False,
    help="Score a resume for ATS compatibility.",
)


@app.command()
def main(
    resume: Annotated[
        str,
        typer.Argument(help="Resume file (YAML/JSON) or identifier in RESUMES_PATH"),
    ],
    job: Annotated[
        Optional[str],
        typer.Option("--job", "-j", help="Job description file or identifier in JOBS_PATH"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print feedback as JSON instead of a text report"),
    ] = False,
    record: Annotated[
        Optional[str],
        typer.Option("--record", help="Print an analysis record (JSON) for this resume ID"),
    ] = None,
    attempts_used: Annotated[
        int,
        typer.Option("--attempts-used", min=0, help="Analyses already recorded for the resume"),
    ] = 0,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Log directory (default: LOGS_PATH/score_<timestamp>)"),
    ] = None,
):
    """Score a resume and print the feedback."""
    log_dir = log_dir or LOGS_PATH / f"score_{now()}"
    console = sys.stderr if (as_json or record) else sys.stdout
    log_file = setup_scoring_logger(log_dir, job_source=job, console=console)

    try:
        content = load_resume(resume)
        job_description = load_job_description(job) if job else None
    except (FileNotFoundError, InvalidResumeStructureError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    resume_label = Path(resume).stem
    log_analysis_start(resume_label, using_job_description=bool(job_description))

    start_time = time.time()
    feedback = analyze_resume(content, job_description=job_description)
    log_analysis_result(resume_label, feedback, time.time() - start_time)

    if record:
        try:
            analysis_record = AtsAnalysisRecord.from_feedback(
                record, feedback, attempts_used=attempts_used
            )
        except AttemptLimitExceededError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(json.dumps(analysis_record.to_dict(), indent=2))
        typer.echo(
            f"Recorded {format_timestamp(analysis_record.created_at)}, "
            f"{remaining_attempts(attempts_used + 1)} attempts left",
            err=True,
        )
    elif as_json:
        typer.echo(json.dumps(feedback.to_dict(), indent=2))
    else:
        typer.echo(format_feedback_report(feedback, resume_label=resume_label))

    typer.echo(f"\nLog: {log_file}", err=True)


if __name__ == "__main__":
    app()
