"""
One Path - An AI Career Co-Pilot

This package compares a user's resume against a target profile and turns
the identified gaps into guided learning roadmaps:
- Document intake for the two uploaded files
- A schema-constrained Gemini request that returns the gap analysis and roadmaps
- Pydantic models for the analysis and roadmap hierarchy
- A linear study navigator over the flattened roadmap topics
- A session state machine that sequences landing, results and study views
- A Gradio user interface

Main Modules:
- intake: File loading and payload encoding
- analysis: Prompt, response schema, reply parsing and the analysis engine
- roadmap: Roadmap flattening and video resource helpers
- study: Study navigation and coaching messages
- session: View state machine for a single user session
- ui: Gradio-based user interface
- app: Main application entry points

Usage:
    # Run the Gradio UI
    python -m one_path.app.main

    # Or use the engine directly
    from one_path.analysis import AnalysisEngine
    from one_path.core.llm_utils import create_llm
    from one_path.config import settings as config
    engine = AnalysisEngine(create_llm(config), config)
    result = engine.analyze(user_payload, target_payload)
"""

__version__ = "0.1.0"
__author__ = "One Path Team"

__all__ = ["__version__", "__author__"]
