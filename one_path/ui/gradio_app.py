import gradio as gr
from one_path.analysis.engine import AnalysisEngine
from one_path.config import settings as config
from one_path.core.llm_utils import create_llm
from one_path.errors import SessionError
from one_path.intake.document_intake import DocumentRole
from one_path.session.state import ResultsTab, Session, View
from one_path.ui.css import custom_css
from one_path.ui.formatters import (
    format_analysis_markdown,
    format_error_markdown,
    format_future_self_markdown,
    format_guide_markdown,
    format_peer_cue_markdown,
    format_progress_html,
    format_roadmaps_markdown,
    format_study_unit_html,
)
import logging

logger = logging.getLogger(__name__)

ACCEPTED_FILE_TYPES = [".pdf", ".txt", ".md", ".png", ".jpg", ".jpeg", ".webp"]


def get_session(session):
    """Each browser session gets its own Session on first use."""
    if session is None:
        session = Session(config)
        logger.info(f"Started session {session.session_id}")
    return session


def render(session: Session):
    """
    Map the session state onto component updates.

    Order matches the ``view_outputs`` list built in create_gradio_ui.
    """
    on_landing = session.view == View.LANDING
    on_results = session.view == View.RESULTS
    in_study = session.view == View.STUDY

    analysis_md = roadmap_md = ""
    if session.result is not None:
        analysis_md = format_analysis_markdown(session.result.analysis)
        roadmap_md = format_roadmaps_markdown(session.result.roadmaps)

    peer_md = guide_md = unit_html = position_md = progress_html = ""
    prev_enabled = next_enabled = False
    navigator = session.navigator
    if in_study and navigator is not None:
        unit = navigator.current_unit
        peer_md = format_peer_cue_markdown(navigator.peer_cue())
        guide_md = format_guide_markdown(unit)
        unit_html = format_study_unit_html(unit)
        position_md = f"**{navigator.position_label()}**"
        progress_html = format_progress_html(navigator.progress())
        prev_enabled = not navigator.is_first
        next_enabled = not navigator.is_last

    study_hint = "" if session.can_enter_study or session.result is None else (
        "*No skill gaps were found, so there is no study area for this analysis.*"
    )

    return (
        gr.update(visible=on_landing),
        gr.update(visible=on_results),
        gr.update(visible=in_study),
        gr.update(value=format_error_markdown(session.error), visible=bool(session.error)),
        gr.update(interactive=session.can_submit, value="Analyzing..." if session.loading else "Analyze & Build My Path"),
        gr.update(selected=session.active_tab.value),
        gr.update(value=analysis_md),
        gr.update(value=roadmap_md),
        gr.update(interactive=session.can_enter_study),
        gr.update(value=study_hint, visible=bool(study_hint)),
        gr.update(value=peer_md),
        gr.update(value=guide_md),
        gr.update(value=unit_html),
        gr.update(value=position_md),
        gr.update(value=progress_html),
        gr.update(interactive=prev_enabled),
        gr.update(interactive=next_enabled),
    )


def create_gradio_ui():
    llm = create_llm(config)
    engine = AnalysisEngine(llm, config)

    def document_handler(role: DocumentRole):
        def handler(path, session):
            session = get_session(session)
            if path:
                if not session.set_document(role, path):
                    gr.Warning(session.error)
            else:
                session.clear_document(role)
            return (session, *render(session))
        return handler

    def lock_submit_handler():
        # Disabled until the submission finishes; render() re-enables it
        return gr.update(interactive=False, value="Analyzing...")

    def submit_handler(session):
        session = get_session(session)
        try:
            if session.submit(engine.analyze):
                gr.Info("✅ Analysis complete")
        except SessionError as e:
            gr.Warning(e.message)
        return (session, *render(session))

    def reset_handler(session):
        session = get_session(session)
        session.reset()
        # Empty the file widgets too, so what is shown matches the empty slots
        return (session, None, None, *render(session))

    def tab_handler(tab: ResultsTab):
        def handler(session):
            session = get_session(session)
            try:
                session.select_tab(tab)
            except SessionError as e:
                logger.warning(f"Ignored tab switch: {e.message}")
            return session
        return handler

    def transition_handler(transition):
        def handler(session):
            session = get_session(session)
            try:
                transition(session)
            except SessionError as e:
                gr.Warning(e.message)
            return (session, *render(session))
        return handler

    # Create theme (will be passed to launch() in Gradio 6.0)
    theme = gr.themes.Base(
        primary_hue="blue",
        secondary_hue="gray",
        neutral_hue="gray",
        font=("SF Pro Display", "system-ui", "sans-serif"),
    ).set(
        body_background_fill="#0a0a0a",
        body_background_fill_dark="#0a0a0a",
        block_background_fill="#141414",
        block_background_fill_dark="#141414",
        block_border_color="#333333",
        block_border_color_dark="#333333",
        button_primary_background_fill="#3b82f6",
        button_primary_background_fill_dark="#3b82f6",
        button_primary_text_color="white",
        button_primary_text_color_dark="white",
    )

    with gr.Blocks(title="One Path") as demo:
        session_state = gr.State(None)

        with gr.Column(visible=True, elem_id="landing-view") as landing_col:
            gr.Markdown("# ONE **PATH**", elem_id="landing-title")
            gr.Markdown(
                "Your AI Career Co-Pilot. Upload your resume and a target profile to analyze "
                "skill gaps and generate your personalized development roadmap."
            )
            with gr.Row():
                user_file = gr.File(
                    label="Your resume",
                    file_types=ACCEPTED_FILE_TYPES,
                    type="filepath",
                    height=160,
                )
                target_file = gr.File(
                    label="Target resume or profile",
                    file_types=ACCEPTED_FILE_TYPES,
                    type="filepath",
                    height=160,
                )
            with gr.Row():
                analyze_btn = gr.Button("Analyze & Build My Path", variant="primary", size="lg", interactive=False)
                clear_btn = gr.Button("Clear documents", size="lg")
            error_md = gr.Markdown(value="", visible=False, elem_id="error-message")

        with gr.Column(visible=False, elem_id="results-view") as results_col:
            with gr.Row():
                study_btn = gr.Button("🚀 Enter Study Area", variant="primary", size="md")
                start_over_btn = gr.Button("↩ New Analysis", size="md")
            study_hint_md = gr.Markdown(value="", visible=False)
            with gr.Tabs(selected=ResultsTab.ANALYSIS.value) as results_tabs:
                with gr.Tab("Resume Analysis", id=ResultsTab.ANALYSIS.value) as analysis_tab:
                    analysis_md = gr.Markdown(elem_id="analysis-view")
                with gr.Tab("Skill Roadmaps", id=ResultsTab.ROADMAP.value) as roadmap_tab:
                    roadmap_md = gr.Markdown(elem_id="roadmap-view")

        with gr.Row(visible=False, elem_id="study-view") as study_col:
            with gr.Column(scale=1, elem_classes="study-sidebar"):
                gr.Markdown("## AI CLASSMATES")
                peer_md = gr.Markdown(elem_classes="classmate-message")
            with gr.Column(scale=3):
                guide_md = gr.Markdown(elem_classes="ai-message")
                unit_html = gr.HTML()
                with gr.Row(elem_classes="study-nav"):
                    prev_btn = gr.Button("Previous", size="md")
                    position_md = gr.Markdown(elem_classes="study-position")
                    next_btn = gr.Button("Next Topic", variant="primary", size="md")
            with gr.Column(scale=1, elem_classes="study-sidebar"):
                gr.Markdown("## FUTURE SELF")
                gr.Markdown(format_future_self_markdown(), elem_classes="future-message")
                progress_html = gr.HTML()
                exit_btn = gr.Button("Exit Study Area", variant="stop", size="md")

        view_outputs = [
            landing_col, results_col, study_col, error_md, analyze_btn,
            results_tabs, analysis_md, roadmap_md, study_btn, study_hint_md,
            peer_md, guide_md, unit_html, position_md, progress_html,
            prev_btn, next_btn,
        ]
        state_and_view = [session_state, *view_outputs]

        # Wire up events
        user_file.change(
            document_handler(DocumentRole.USER),
            inputs=[user_file, session_state],
            outputs=state_and_view
        )
        target_file.change(
            document_handler(DocumentRole.TARGET),
            inputs=[target_file, session_state],
            outputs=state_and_view
        )

        analyze_btn.click(
            lock_submit_handler,
            outputs=[analyze_btn]
        ).then(
            submit_handler,
            inputs=[session_state],
            outputs=state_and_view,
            show_progress="full"
        )

        clear_btn.click(
            reset_handler,
            inputs=[session_state],
            outputs=[session_state, user_file, target_file, *view_outputs]
        )

        analysis_tab.select(tab_handler(ResultsTab.ANALYSIS), inputs=[session_state], outputs=[session_state])
        roadmap_tab.select(tab_handler(ResultsTab.ROADMAP), inputs=[session_state], outputs=[session_state])

        study_btn.click(transition_handler(Session.enter_study), [session_state], state_and_view)
        exit_btn.click(transition_handler(Session.exit_study), [session_state], state_and_view)
        start_over_btn.click(transition_handler(Session.start_over), [session_state], state_and_view)
        prev_btn.click(transition_handler(Session.previous_unit), [session_state], state_and_view)
        next_btn.click(transition_handler(Session.next_unit), [session_state], state_and_view)

    # Attach theme and css to demo for Gradio 6.0
    demo.theme = theme
    demo.css = custom_css
    return demo
