"""Streamlit Web UI for skillens.

Paste resume text or upload a PDF/DOCX/TXT/MD file, get an ATS score and
improvement suggestions.
"""

from __future__ import annotations

import logging

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

from skillens.config import load_config
from skillens.pipeline.analysis import analyze_document, analyze_text
from skillens.parsers.resume_parser import SUPPORTED_SUFFIXES

logger = logging.getLogger(__name__)

NO_SUGGESTIONS_MESSAGE = "Your resume looks great! No major suggestions at this time."
EMPTY_INPUT_MESSAGE = "Please upload a file or paste your resume content."

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Skillens",
    page_icon=":page_facing_up:",
    layout="centered",
)

config = load_config()
max_mb = config.upload.max_bytes / (1024 * 1024)

st.title("Skillens")
st.caption("Smart resume analyzer: quick, rule-based ATS feedback")

# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

resume_file = st.file_uploader(
    "Upload your resume",
    type=[s.lstrip(".") for s in SUPPORTED_SUFFIXES],
    help=f"PDF, DOCX, TXT or MD ({max_mb:.0f}MB max)",
)

resume_text = st.text_area(
    "...or paste your resume",
    height=300,
    placeholder="Paste the full text of your resume here...",
)

# ---------------------------------------------------------------------------
# Analysis
# ---------------------------------------------------------------------------

if st.button("Analyze", type="primary"):
    if resume_file is not None:
        with st.spinner("Reading file..."):
            result = analyze_document(
                resume_file.getvalue(),
                filename=resume_file.name,
                content_type=resume_file.type,
                max_bytes=config.upload.max_bytes,
            )
    elif resume_text.strip():
        result = analyze_text(resume_text)
    else:
        st.warning(EMPTY_INPUT_MESSAGE)
        st.stop()

    logger.info("Analysis complete: score=%d", result.score)

    st.metric("ATS score", f"{result.score} / 100")
    st.progress(result.score / 100)

    st.subheader("Suggestions")
    if result.suggestions:
        for suggestion in result.suggestions:
            st.markdown(f"- {suggestion}")
    else:
        st.success(NO_SUGGESTIONS_MESSAGE)
