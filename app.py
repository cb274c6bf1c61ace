from __future__ import annotations

import logging

import pandas as pd
import streamlit as st

from core.api_client import ApiError, HiringApiClient
from core.assignments import AssignmentDesk, recruiters_by_job
from core.charts import job_skill_frame, pie_chart, threshold_frame
from core.config import configure_logging, load_settings
from core.feedback import MAX_STARS, FeedbackForm, load_employees, submit_feedback
from core.job_skills import JobSkillRatings, has_any_rating
from core.jobs import job_display_rows, job_options, paginate, parse_job
from core.models import RatingMode
from core.ratings import mode_label
from core.thresholds import SkillThresholdBoard

APP_TITLE = "Hiring Console"
APP_SUBTITLE = "Job postings, recruiter assignment, interview feedback and skill thresholds"
PAGES = ["Job Board", "Skill Thresholds", "Job Skills", "Recruiter Assignments", "Interview Feedback"]
SKILL_INPUT_PREFIX = "skill_input_"
MESSAGE_STYLES = {"success": st.success, "warning": st.warning, "error": st.error, "info": st.info}

logger = logging.getLogger("hiring_console")


def ensure_state():
    if "settings" not in st.session_state:
        settings = load_settings()
        configure_logging(settings.log_level)
        st.session_state["settings"] = settings
    settings = st.session_state["settings"]
    if "client" not in st.session_state:
        st.session_state["client"] = HiringApiClient(settings.api_base_url, timeout=settings.api_timeout)
    client = st.session_state["client"]
    if "board" not in st.session_state:
        board = SkillThresholdBoard(client, settings)
        board.load()
        st.session_state["board"] = board
    if "desk" not in st.session_state:
        desk = AssignmentDesk(client)
        desk.load()
        st.session_state["desk"] = desk
    if "job_page" not in st.session_state:
        st.session_state["job_page"] = 1
    if "job_skill_drafts" not in st.session_state:
        st.session_state["job_skill_drafts"] = {}
    if "feedback_status" not in st.session_state:
        st.session_state["feedback_status"] = None
    if "feedback_version" not in st.session_state:
        st.session_state["feedback_version"] = 0


def inject_styles():
    st.markdown(
        """
        <style>
        .category-title { font-size: 1.15rem; font-weight: 700; padding: 6px 0; }
        .skill-error { color: #b91c1c; font-size: 0.8rem; }
        </style>
        """,
        unsafe_allow_html=True,
    )


def load_jobs(client: HiringApiClient):
    try:
        return [parse_job(item) for item in client.list_job_descriptions()], None
    except ApiError as exc:
        logger.warning("Error fetching jobs: %s", exc)
        return [], "Failed to load job descriptions. Please try again."


def reset_skill_inputs():
    for key in [k for k in st.session_state.keys() if str(k).startswith(SKILL_INPUT_PREFIX)]:
        del st.session_state[key]


def on_skill_edit(board: SkillThresholdBoard, skill):
    key = f"{SKILL_INPUT_PREFIX}{skill.id}"
    if not board.stage(skill.id, st.session_state[key]):
        st.session_state[key] = str(board.draft.resolve(skill))


def on_save_all(board: SkillThresholdBoard):
    board.commit_all()
    reset_skill_inputs()


def on_save_one(board: SkillThresholdBoard, skill_id: int):
    if board.commit_one(skill_id):
        reset_skill_inputs()


def on_mode_toggle(board: SkillThresholdBoard):
    board.set_mode(RatingMode.PERCENTAGE if st.session_state["percentage_mode"] else RatingMode.ORDINAL)


def render_category_body(board: SkillThresholdBoard, category):
    table_col, chart_col = st.columns([0.55, 0.45])
    with table_col:
        name_head, value_head, action_head = st.columns([2, 1.2, 0.8])
        name_head.markdown("**Skills**")
        value_head.markdown(f"**{mode_label(board.mode, board.settings.ordinal_min)}**")
        action_head.markdown("&nbsp;")
        for skill in category.skills:
            if skill.id is None:
                continue
            name_col, value_col, action_col = st.columns([2, 1.2, 0.8])
            name_col.write(skill.skill)
            key = f"{SKILL_INPUT_PREFIX}{skill.id}"
            if key not in st.session_state:
                st.session_state[key] = str(board.draft.resolve(skill))
            value_col.text_input(
                skill.skill,
                key=key,
                label_visibility="collapsed",
                on_change=on_skill_edit,
                args=(board, skill),
            )
            reason = board.draft.rejections.get(skill.id)
            if reason:
                value_col.markdown(f'<div class="skill-error">{reason}</div>', unsafe_allow_html=True)
            action_col.button(
                "Save",
                key=f"save_one_{skill.id}",
                disabled=skill.id not in board.draft.overlay,
                on_click=on_save_one,
                args=(board, skill.id),
            )
        st.button(
            "SAVE",
            key=f"save_all_{category.id}",
            type="primary",
            disabled=not board.draft.has_pending,
            on_click=on_save_all,
            args=(board,),
        )
    with chart_col:
        frame = threshold_frame(board.draft.project(category), board.mode)
        if frame.empty or frame["Value"].sum() <= 0:
            st.caption("Add ratings to see the chart")
        else:
            st.altair_chart(pie_chart(frame), use_container_width=False)


def render_skill_thresholds(board: SkillThresholdBoard):
    st.markdown("### Skills Assessment")
    if board.message:
        MESSAGE_STYLES.get(board.message_level, st.info)(board.message)
    if st.button("Reload categories"):
        board.load()
        reset_skill_inputs()
        st.rerun()

    st.toggle(
        "Percentage mode",
        value=board.mode == RatingMode.PERCENTAGE,
        key="percentage_mode",
        on_change=on_mode_toggle,
        args=(board,),
    )
    if not board.categories:
        st.info("No skill categories loaded.")
        return

    selected = board.selected_category
    for category in board.categories:
        is_open = selected is not None and category.id == selected.id
        st.button(
            f"{category.icon} {category.name} {'▼' if is_open else '▶'}",
            key=f"category_{category.id}",
            use_container_width=True,
            on_click=board.toggle_category,
            args=(category.id,),
        )
        if is_open:
            st.markdown(
                f'<div class="category-title" style="color: {category.color}">{category.icon} {category.name}</div>',
                unsafe_allow_html=True,
            )
            render_category_body(board, category)


def render_job_board(client: HiringApiClient, page_size: int):
    st.markdown("### Job Descriptions")
    jobs, error = load_jobs(client)
    if error:
        st.error(error)

    uploaded = st.file_uploader("Upload a job description for analysis", type=["pdf", "docx", "txt"])
    if uploaded is not None and st.button("Analyze and add"):
        try:
            client.analyze_job_description(uploaded.name, uploaded.getvalue())
        except ApiError as exc:
            logger.warning("Error uploading file: %s", exc)
            st.error("Failed to upload and analyze job description. Please try again.")
        else:
            st.success("Job description analyzed.")
            st.rerun()

    page = paginate(jobs, st.session_state["job_page"], page_size)
    st.session_state["job_page"] = page.page
    rows = job_display_rows(page.items)
    st.dataframe(pd.DataFrame(rows, columns=["id", "Role", "Company", "Date", "Status"]), hide_index=True, use_container_width=True)

    prev_col, info_col, next_col = st.columns([1, 2, 1])
    if prev_col.button("Previous", disabled=not page.has_previous):
        st.session_state["job_page"] = page.page - 1
        st.rerun()
    shown_to = min(page.first_index + page.per_page, page.total)
    info_col.caption(f"Showing {page.first_index + 1 if page.total else 0}-{shown_to} of {page.total}")
    if next_col.button("Next", disabled=not page.has_next):
        st.session_state["job_page"] = page.page + 1
        st.rerun()

    options = job_options(jobs)
    if not options:
        return
    selected = st.selectbox("View job details", list(options.keys()), format_func=lambda job_id: options[job_id])
    if st.button("Show details"):
        try:
            job = parse_job(client.get_job_description(selected))
        except ApiError as exc:
            logger.warning("Error fetching job %s: %s", selected, exc)
            st.error("Failed to load job details. Please try again.")
            return
        with st.container(border=True):
            st.markdown(f"#### {job.title}")
            st.caption(f"{job.company} · {job.location} · {job.job_type}")
            st.write(job.description)
            st.write(f"- Experience: {job.experience_required or 'n/a'}")
            st.write(f"- Education: {job.education_required or 'n/a'}")
            if job.salary_range:
                st.write(f"- Salary: {job.salary_range}")
            if job.required_skills:
                st.write("Required skills: " + ", ".join(job.required_skills))
            if job.preferred_skills:
                st.write("Preferred skills: " + ", ".join(job.preferred_skills))
            if job.application_url:
                st.write(f"[Apply]({job.application_url})")
            if job.contact_email:
                st.write(f"Contact: {job.contact_email}")


def render_job_skill_group(title: str, ratings: dict[str, int], setter, prefix: str):
    st.markdown(f"#### {title}")
    left, right = st.columns(2)
    with left:
        for skill, value in list(ratings.items()):
            raw = st.number_input(skill, min_value=0, max_value=10, value=int(value), step=1, key=f"{prefix}_{skill}")
            setter(skill, raw)
    with right:
        if has_any_rating(ratings):
            st.altair_chart(pie_chart(job_skill_frame(ratings), size=260), use_container_width=False)
        else:
            st.caption("Add ratings to see the chart")


def render_job_skills(client: HiringApiClient):
    st.markdown("### Set Job Skills")
    jobs, error = load_jobs(client)
    if error:
        st.error(error)
    options = job_options(jobs)
    if not options:
        st.info("No job descriptions available.")
        return
    job_id = st.selectbox("Job", list(options.keys()), format_func=lambda value: options[value])
    drafts = st.session_state["job_skill_drafts"]
    if job_id not in drafts:
        try:
            job = parse_job(client.get_job_description(job_id))
        except ApiError as exc:
            logger.warning("Error fetching job %s: %s", job_id, exc)
            st.error("Failed to load job skills. Please try again.")
            return
        ratings = JobSkillRatings(job)
        ratings.load(client)
        drafts[job_id] = ratings
    ratings = drafts[job_id]

    if ratings.required:
        render_job_skill_group("Required Skills", ratings.required, ratings.set_required, f"req_{job_id}")
    if ratings.preferred:
        render_job_skill_group("Preferred Skills", ratings.preferred, ratings.set_preferred, f"pref_{job_id}")

    if st.button("Save Skill Ratings"):
        problem = ratings.save(client)
        if problem:
            st.error(problem)
        else:
            st.success("Skill ratings saved successfully!")


def render_assignments(desk: AssignmentDesk, client: HiringApiClient):
    st.markdown("### Job Recruiter Assignment")
    jobs, error = load_jobs(client)
    if error:
        st.error(error)
    if desk.error:
        st.error(desk.error)
    if desk.success:
        st.success(desk.success)

    job_choices = job_options(jobs)
    recruiter_choices = {r.id: f"{r.name} ({r.email})" if r.email else r.name for r in desk.recruiters}
    with st.form("assign_form"):
        job_id = st.selectbox("Job", [None] + list(job_choices), format_func=lambda v: "Select a job" if v is None else job_choices[v])
        recruiter_id = st.selectbox(
            "Recruiter",
            [None] + list(recruiter_choices),
            format_func=lambda v: "Select a recruiter" if v is None else recruiter_choices[v],
        )
        if st.form_submit_button("Assign Recruiter"):
            desk.create(job_id, recruiter_id)
            st.rerun()

    st.markdown("#### Current Assignments")
    if not desk.assignments:
        st.info("No assignments yet.")
        return
    st.dataframe(
        pd.DataFrame(
            [
                {"Job": a.job_title, "Recruiter": a.recruiter_name, "Assigned": a.assigned_date}
                for a in desk.assignments
            ]
        ),
        hide_index=True,
        use_container_width=True,
    )
    by_job = recruiters_by_job(desk.assignments)
    st.caption(" · ".join(f"{job}: {', '.join(names)}" for job, names in by_job.items()))

    labels = {a.id: f"{a.job_title} → {a.recruiter_name}" for a in desk.assignments}
    assignment_id = st.selectbox("Edit or remove", list(labels), format_func=lambda v: labels[v])
    current = next(a for a in desk.assignments if a.id == assignment_id)
    recruiter_ids = list(recruiter_choices)
    new_recruiter = None
    if recruiter_ids:
        new_recruiter = st.selectbox(
            "Reassign to",
            recruiter_ids,
            index=recruiter_ids.index(current.recruiter_id) if current.recruiter_id in recruiter_ids else 0,
            format_func=lambda v: recruiter_choices[v],
        )
    edit_col, delete_col = st.columns(2)
    if edit_col.button("Update Assignment"):
        desk.update(assignment_id, current.job_id, new_recruiter)
        st.rerun()
    if delete_col.button("Delete Assignment"):
        desk.delete(assignment_id)
        st.rerun()


def render_feedback(client: HiringApiClient):
    st.markdown("### Interview Feedback")
    status = st.session_state["feedback_status"]
    if status:
        (st.success if status.success else st.error)(status.message)

    jobs, error = load_jobs(client)
    if error:
        st.error(error)
    job_choices = job_options(jobs)
    employees = load_employees(client)
    employee_choices = {e.id: e.name for e in employees}

    # widget keys carry a version so a successful submit starts from a blank form
    version = st.session_state["feedback_version"]
    with st.form("feedback_form", clear_on_submit=False):
        job_id = st.selectbox(
            "Job Description",
            [None] + list(job_choices),
            format_func=lambda v: "Select a job" if v is None else job_choices[v],
            key=f"feedback_job_{version}",
        )
        employee_id = st.selectbox(
            "Employee",
            [None] + list(employee_choices),
            format_func=lambda v: "Select an employee" if v is None else employee_choices[v],
            key=f"feedback_employee_{version}",
        )
        position = st.text_input("Position", key=f"feedback_position_{version}")
        technical = st.text_area("Hiring Manager Feedback", key=f"feedback_technical_{version}")
        communication = st.text_area("Communication Skills", key=f"feedback_communication_{version}")
        rating = st.slider("Overall Rating", 0, MAX_STARS, 0, key=f"feedback_rating_{version}")
        if st.form_submit_button("Submit Feedback"):
            form = FeedbackForm(
                job_id=job_id,
                employee_id=employee_id,
                position=position,
                technical_skills=technical,
                communication_skills=communication,
                overall_rating=int(rating),
            )
            status, next_form = submit_feedback(client, form)
            st.session_state["feedback_status"] = status
            if next_form is not form:
                st.session_state["feedback_version"] = version + 1
            st.rerun()


st.set_page_config(page_title=APP_TITLE, layout="wide")
inject_styles()
st.title(APP_TITLE)
st.caption(APP_SUBTITLE)
ensure_state()

settings = st.session_state["settings"]
client = st.session_state["client"]

with st.sidebar:
    st.markdown("### Navigation")
    page = st.radio("Go to", PAGES)
    st.caption(f"API: {settings.api_base_url}")

if page == "Job Board":
    render_job_board(client, settings.page_size)
elif page == "Skill Thresholds":
    render_skill_thresholds(st.session_state["board"])
elif page == "Job Skills":
    render_job_skills(client)
elif page == "Recruiter Assignments":
    render_assignments(st.session_state["desk"], client)
else:
    render_feedback(client)
