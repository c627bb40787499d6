"""Streamlit UI for the oral vs written assessment survey.

Pages read and write the two collections only through the local store, so
what one page records is what the others aggregate.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd
import streamlit as st

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (ROOT, SRC):
    path_str = str(path)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)

from app.sample_data import load_sample_opinions, load_sample_scores  # noqa: E402
from app.ui import (  # noqa: E402
    AppShell,
    card,
    download_csv,
    flash,
    key_finding,
    kpi_row,
    muted,
    render_notices,
    section_header,
    style_fig,
    type_pill,
)
from examertric import invariants, metrics, plots  # noqa: E402
from examertric.auth import AuthSession, FirebaseAuthClient  # noqa: E402
from examertric.config import Settings, configure_logging  # noqa: E402
from examertric.entries import EntryError, new_opinion, new_score  # noqa: E402
from examertric.io import CSV_HEADER, import_scores, is_csv_filename, scores_to_csv  # noqa: E402
from examertric.models import ASSESSMENT_TYPES, PREFERENCE_TYPES, Opinion, PreferenceType, StudentScore  # noqa: E402
from examertric.notices import failure, success  # noqa: E402
from examertric.storage import (  # noqa: E402
    LocalStore,
    StorageError,
    append_opinion,
    append_scores,
    clear_all,
    load_opinions,
    load_scores,
)
from tools.generate_synthetic import generate_synthetic_scores  # noqa: E402

st.set_page_config(page_title="Examertric", layout="wide", page_icon="📊")

SETTINGS = Settings.from_env()
configure_logging(SETTINGS.log_level)
logger = logging.getLogger(__name__)

PUBLIC_PAGES = ["Login", "Sign up", "About"]
DATA_PAGES = ["Analyze", "Opinions", "Insights", "About"]


def _rerun():
    st.rerun()


@st.cache_resource
def _auth_client(api_key: str) -> FirebaseAuthClient:
    return FirebaseAuthClient(api_key)


def _init_state() -> None:
    defaults = {
        "auth": None,
        "page": None,
        "uploader_key": 0,
    }
    for key, val in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = val
    if st.session_state["auth"] is None:
        st.session_state["auth"] = AuthSession(_auth_client(SETTINGS.firebase_api_key))


def _session() -> AuthSession:
    return st.session_state["auth"]


def _store() -> LocalStore:
    return LocalStore(SETTINGS.storage_path)


def _load_scores(store: LocalStore) -> List[StudentScore]:
    try:
        return load_scores(store)
    except StorageError as exc:
        logger.error(f"Error loading scores: {exc}")
        st.error(f"Stored scores could not be read: {exc}")
        return []


def _load_opinions(store: LocalStore) -> List[Opinion]:
    try:
        return load_opinions(store)
    except StorageError as exc:
        logger.error(f"Error loading opinions: {exc}")
        st.error(f"Stored opinions could not be read: {exc}")
        return []


def _go(page: str) -> None:
    st.session_state["page"] = page
    _rerun()


def _render_login():
    session = _session()
    if not SETTINGS.auth_configured:
        st.warning("Sign-in is not configured. Set EXAMERTRIC_FIREBASE_API_KEY to enable it.")

    with card("Welcome back", "Log in to record scores and opinions"):
        with st.form("login_form"):
            email = st.text_input("Email")
            password = st.text_input("Password", type="password")
            submitted = st.form_submit_button("Log in")

    if submitted:
        notice = session.login(email.strip(), password)
        flash(notice)
        if not notice.is_error:
            _go("Analyze")
        _rerun()


def _render_signup():
    session = _session()
    if not SETTINGS.auth_configured:
        st.warning("Sign-up is not configured. Set EXAMERTRIC_FIREBASE_API_KEY to enable it.")

    with card("Create an account", "Join to share your assessment experience"):
        with st.form("signup_form"):
            name = st.text_input("Name")
            email = st.text_input("Email")
            password = st.text_input("Password", type="password")
            submitted = st.form_submit_button("Sign up")

    if submitted:
        if not (name.strip() and email.strip() and password):
            flash(failure("Missing information", "Please fill in all fields"))
            _rerun()
        notice = session.signup(email.strip(), password, name.strip())
        flash(notice)
        if not notice.is_error:
            _go("Analyze")
        _rerun()


def _import_scores(store: LocalStore, source, label: str) -> None:
    flash(import_scores(store, source, label))


def _upload_card(store: LocalStore):
    with card("Upload Student Data", "Upload a CSV file with columns: Student Name, Assessment Type, Score"):
        uploaded = st.file_uploader("CSV file", key=f"csv-upload-{st.session_state['uploader_key']}")
        muted("CSV format: Student Name, Assessment Type (Oral/Written), Score (0-100)")
        st.code(f"{CSV_HEADER}\nJohn Doe,Oral,85\nJane Smith,Written,92", language="text")

        if uploaded is not None:
            if is_csv_filename(uploaded.name):
                _import_scores(store, uploaded, uploaded.name)
            else:
                flash(failure("Invalid file type", "Please upload a CSV file"))
            # a fresh widget key clears the uploader so the file is not re-imported on rerun
            st.session_state["uploader_key"] += 1
            _rerun()

        if st.button("Import a synthetic class (40 students)"):
            synthetic_path = SETTINGS.data_dir / "synthetic_class.csv"
            try:
                generate_synthetic_scores(synthetic_path, n_students=40, invalid_rows=4)
            except (OSError, ValueError) as exc:
                logger.error(f"Synthetic class generation failed: {exc}")
                flash(failure("Upload failed", f"Synthetic class generation failed: {exc}"))
                _rerun()
            _import_scores(store, synthetic_path, synthetic_path.name)
            _rerun()


def _score_form(store: LocalStore):
    with card("Add Student Score", "Manually record a new assessment result"):
        with st.form("score_form", clear_on_submit=True):
            student_name = st.text_input("Student Name", placeholder="Enter student name")
            assessment_type = st.selectbox("Assessment Type", options=ASSESSMENT_TYPES, index=0)
            score = st.number_input("Score", value=None, step=1.0, placeholder="Enter score")
            submitted = st.form_submit_button("Add Score")

    if not submitted:
        return

    try:
        record = new_score(student_name, assessment_type, score)
        append_scores(store, [record])
    except EntryError as exc:
        flash(failure(exc.title, exc.description))
    except StorageError as exc:
        logger.error(f"Error saving score: {exc}")
        flash(failure("Could not save score", str(exc)))
    else:
        flash(success("Score added", f"Added score for {student_name}"))
    _rerun()


def _scores_table(scores: List[StudentScore]):
    section_header("All Recorded Scores", f"{len(scores)} assessment results")
    table = pd.DataFrame(
        {
            "Student Name": [s.student_name for s in scores],
            "Assessment Type": [s.assessment_type.value for s in scores],
            "Score": [s.score for s in scores],
        }
    )
    st.dataframe(table, use_container_width=True, height=320, hide_index=True)
    download_csv("Download scores (CSV)", scores_to_csv(scores), "student_scores.csv")


def _render_quality(score_df: pd.DataFrame):
    with st.expander("Data checks"):
        results = invariants.run_invariants(score_df)
        res_df = pd.DataFrame(results)
        res_df.loc[:, "detail"] = res_df["detail"].astype(str)
        st.dataframe(res_df, use_container_width=True, hide_index=True)
        if all(res["ok"] for res in results):
            st.success("All checks passed")
        else:
            st.warning("Some recorded scores need attention; manual entries are not range-checked.")


def _render_analyze(store: LocalStore):
    _upload_card(store)

    scores = _load_scores(store)
    score_df = metrics.scores_frame(scores)

    left, right = st.columns(2)
    with left:
        _score_form(store)
    with right:
        with card("Average Scores Comparison", "Visual comparison of assessment performance"):
            if scores:
                fig = plots.average_bar(metrics.average_by_type(score_df))
                style_fig(fig)
                st.plotly_chart(fig, use_container_width=True)
            else:
                st.info("Add some scores to see the comparison chart")

    if scores:
        _scores_table(scores)
        _render_quality(score_df)


def _opinion_form(store: LocalStore):
    with card("Share Your Opinion", "Tell us which assessment type you prefer and why"):
        with st.form("opinion_form", clear_on_submit=True):
            preferred = st.radio(
                "Which test type do you prefer?",
                options=PREFERENCE_TYPES,
                index=PREFERENCE_TYPES.index(PreferenceType.WRITTEN.value),
                horizontal=True,
            )
            reason = st.text_area("Why do you prefer this type?", placeholder="Share your thoughts...")
            submitted = st.form_submit_button("Submit Opinion")

    if not submitted:
        return

    try:
        append_opinion(store, new_opinion(preferred, reason))
    except EntryError as exc:
        flash(failure(exc.title, exc.description))
    except StorageError as exc:
        logger.error(f"Error saving opinion: {exc}")
        flash(failure("Could not save opinion", str(exc)))
    else:
        flash(success("Opinion recorded", "Thank you for sharing your perspective!"))
    _rerun()


def _render_opinions(store: LocalStore):
    opinions = _load_opinions(store)

    left, right = st.columns(2)
    with left:
        _opinion_form(store)
    with right:
        with card("Preference Distribution", "What students prefer overall"):
            counts = metrics.preference_counts(metrics.opinions_frame(opinions))
            if counts.empty:
                st.info("Submit an opinion to see the distribution")
            else:
                fig = plots.preference_pie(counts)
                style_fig(fig)
                st.plotly_chart(fig, use_container_width=True)

    if opinions:
        section_header("Recent Opinions")
        for opinion in reversed(opinions):
            with st.container(border=True):
                st.markdown(
                    f"{type_pill(opinion.preferred_type.value)} &nbsp; <span class='small-muted'>{opinion.timestamp}</span>",
                    unsafe_allow_html=True,
                )
                st.write(opinion.reason)


def _render_insights(store: LocalStore):
    scores = _load_scores(store)
    opinions = _load_opinions(store)
    stats = metrics.compute_insights(scores, opinions)

    kpi_row(
        [
            {"label": "Oral Average", "value": f"{stats.oral_avg:g}"},
            {"label": "Written Average", "value": f"{stats.written_avg:g}"},
            {"label": "Total Assessments", "value": stats.total_scores},
            {"label": "Student Opinions", "value": stats.total_opinions},
        ]
    )

    section_header("Key Finding")
    key_finding(stats.summary)

    left, right = st.columns(2)
    with left:
        with card("Performance Comparison", "Average scores by assessment type"):
            if stats.total_scores:
                fig = plots.average_bar(stats.chart_rows(), title="Average score")
                style_fig(fig)
                st.plotly_chart(fig, use_container_width=True)
            else:
                st.info("No performance data available yet")
    with right:
        with card("Student Preferences", "Distribution of preferred assessment types"):
            if stats.total_opinions:
                fig = plots.preference_pie(stats.pie_rows(), percent=True)
                style_fig(fig)
                st.plotly_chart(fig, use_container_width=True)
            else:
                st.info("No opinion data available yet")


def _render_about():
    with card("Project Goal"):
        st.write(
            "Examertric is an educational research platform that helps students, teachers, and researchers "
            "explore how students perform in, and feel about, oral and written assessments. "
            "Collecting real performance data alongside student opinions shows the strengths and "
            "preferences associated with each assessment type, informing more effective evaluation strategies."
        )
    left, right = st.columns(2)
    with left:
        with card("For Students"):
            st.write("Share your experiences and preferences so educators can see how assessment methods affect learning.")
    with right:
        with card("For Educators"):
            st.write("Gather data-driven insights about assessment effectiveness to inform decisions in your curriculum.")
    with card("Research Inspiration"):
        st.write(
            "Inspired by the study *Oral vs Written Assessments: A Test of Students' Performance and Attitudes*, "
            "which compares the effectiveness of both formats and how students perceive them."
        )


def _sidebar(shell: AppShell, store: LocalStore) -> str:
    shell.sidebar_brand()
    session = _session()
    gated = SETTINGS.require_login and not session.is_authenticated
    pages = PUBLIC_PAGES if gated else DATA_PAGES

    current: Optional[str] = st.session_state.get("page")
    if current not in pages:
        current = pages[0]
    page = st.sidebar.radio("Navigate", options=pages, index=pages.index(current))
    st.session_state["page"] = page

    if session.user is not None:
        st.sidebar.divider()
        st.sidebar.write(f"Signed in as **{session.user.name}**")
        if st.sidebar.button("Log out"):
            flash(session.logout())
            _go("Login")

    if not gated:
        st.sidebar.divider()
        st.sidebar.caption("Data")
        if st.sidebar.button("Load sample data"):
            try:
                append_scores(store, load_sample_scores())
                for opinion in load_sample_opinions():
                    append_opinion(store, opinion)
            except StorageError as exc:
                logger.error(f"Error loading sample data: {exc}")
                flash(failure("Could not load sample data", str(exc)))
            else:
                flash(success("Sample data loaded", "Added sample scores and opinions"))
            _rerun()
        if st.sidebar.button("Clear stored data"):
            try:
                clear_all(store)
            except OSError as exc:
                logger.error(f"Error clearing stored data: {exc}")
                flash(failure("Could not clear data", str(exc)))
            else:
                flash(success("Data cleared", "All stored scores and opinions were removed"))
            _rerun()

    return page


def main():
    _init_state()
    shell = AppShell("Examertric", "Oral vs written assessment insights")
    store = _store()

    page = _sidebar(shell, store)
    render_notices()

    descriptions = {
        "Login": "Log in to your account",
        "Sign up": "Create a new account",
        "Analyze": "Upload or enter student scores to compare assessment performance",
        "Opinions": "Share which assessment type you prefer",
        "Insights": "Aggregated performance and preference findings",
        "About": "Why this project exists",
    }
    shell.header(page, descriptions.get(page))

    if page == "Login":
        _render_login()
    elif page == "Sign up":
        _render_signup()
    elif page == "Analyze":
        _render_analyze(store)
    elif page == "Opinions":
        _render_opinions(store)
    elif page == "Insights":
        _render_insights(store)
    else:
        _render_about()


if __name__ == "__main__":
    main()
