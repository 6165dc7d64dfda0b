"""
Module: builder.output.zip_writer

Purpose:
    Bundle rendered variant documents and the answer key into one ZIP
    archive. Every member is already rendered in memory, so the archive is
    only created once all content exists.

Key Functions:
    - write_exam_zip(): Main entry point

Dependencies:
    - zipfile (std)

Used By:
    - builder.controller: Build pipeline
"""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Mapping

from ..answer_key import AnswerKey
from ..config import ANSWER_KEY_NAME

logger = logging.getLogger(__name__)


def write_exam_zip(
    documents: Mapping[str, bytes],
    answer_key: AnswerKey,
    output_path: Path,
) -> Path:
    """
    Write the exam archive.

    Creates a ZIP file with structure:
        Shuffled_Exams.zip
        ├── Test_Version_001.docx
        ├── ...
        ├── Test_Version_NNN.docx
        └── Answer_Key.csv

    Args:
        documents: Member name -> rendered bytes, in version order
        answer_key: Compiled answer key
        output_path: Path for .zip file (will append .zip if missing)

    Returns:
        Path to created ZIP file

    Raises:
        OSError: If output path is not writable
    """
    if output_path.suffix != ".zip":
        output_path = output_path.with_suffix(".zip")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    logger.info(f"Creating exam archive at {output_path}")

    try:
        with zipfile.ZipFile(output_path, "w", zipfile.ZIP_DEFLATED) as zf:
            for name, data in documents.items():
                zf.writestr(name, data)
            zf.writestr(ANSWER_KEY_NAME, answer_key.to_csv().encode("utf-8"))
    except OSError:
        output_path.unlink(missing_ok=True)
        raise

    return output_path
