"""Streamlit Web UI for the copy refinery relay.

Two modes:
  A) Transform     - select text + action (+ context, style guide) → transformed copy
  B) Style Guide   - example text → comprehensive + concise style guide, reusable in A

All calls go through the relay server (``copy-refinery serve``) via RelayClient.
"""

from __future__ import annotations

import asyncio
import logging
import os

logger = logging.getLogger(__name__)

import nest_asyncio
import streamlit as st
from dotenv import load_dotenv

load_dotenv()
nest_asyncio.apply()

from copy_refinery.clients.relay_client import RelayClient
from copy_refinery.models.actions import Action

RELAY_URL = os.environ.get("COPY_REFINERY_URL", "http://127.0.0.1:3000")

ACTION_LABELS = {
    Action.ARTICULATE: "Articulate - notes to prose",
    Action.REFINE: "Refine - polish wording",
    Action.EDIT: "Edit - follow an instruction",
    Action.CUSTOM: "Custom - free-form instruction",
    Action.SHORTEN: "Shorten",
    Action.ELONGATE: "Elongate",
    Action.SIMPLIFY: "Simplify",
}

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Copy Refinery",
    page_icon=":pencil2:",
    layout="wide",
)


def _client() -> RelayClient:
    return RelayClient(st.session_state.get("relay_url", RELAY_URL))


# ---------------------------------------------------------------------------
# Sidebar - relay connection and model selection
# ---------------------------------------------------------------------------

with st.sidebar:
    st.title("Copy Refinery")
    st.caption("Claude-powered copy transformations")

    mode = st.radio("Mode", ["Transform", "Style Guide"], index=0)

    st.divider()

    st.session_state["relay_url"] = st.text_input("Relay URL", value=RELAY_URL)

    models_result = asyncio.run(_client().get_models())
    if models_result.get("success"):
        model_ids = list(models_result["models"])
        current_id = models_result["currentModel"]["id"]
        chosen = st.selectbox(
            "Model",
            model_ids,
            index=model_ids.index(current_id) if current_id in model_ids else 0,
            format_func=lambda m: models_result["models"][m]["name"],
        )
        st.caption(models_result["models"][chosen]["description"])
        if chosen != current_id:
            set_result = asyncio.run(_client().set_model(chosen))
            if not set_result.get("success"):
                st.error(f"Model switch failed: {set_result.get('error')}")
    else:
        st.error(f"Relay unreachable: {models_result.get('error')}")

    if st.button("Health check"):
        health = asyncio.run(_client().check_health())
        if health.get("status") == "ok" and health.get("claude", {}).get("success"):
            st.success("Claude API reachable")
        else:
            st.error(health.get("error") or health.get("claude", {}).get("error", "unknown error"))


# ---------------------------------------------------------------------------
# Mode A: Transform
# ---------------------------------------------------------------------------


def _mode_transform():
    st.header("Transform")

    action = st.selectbox("Action", list(Action), format_func=lambda a: ACTION_LABELS[a])
    text = st.text_area("Selected text", height=160)
    instruction = ""
    if action.requires_instruction:
        instruction = st.text_input("Instruction", placeholder="e.g. Make it more formal")

    with st.expander("Options"):
        context = st.text_area("Context (full editor text, reference only)", height=120)
        json_mode = st.checkbox("JSON template mode")
        use_guide = st.checkbox(
            "Apply generated style guide",
            value="style_guide" in st.session_state,
            disabled="style_guide" not in st.session_state,
        )
        tone = st.text_input("Tone (generic actions only)")

    if st.button("Run", type="primary", disabled=not text.strip()):
        if action.requires_instruction and not instruction.strip():
            st.warning("This action needs an instruction.")
            return
        options: dict = {"instruction": instruction or None}
        if context.strip():
            options["context"] = context
        if json_mode:
            options["mode"] = "json"
        if tone.strip():
            options["tone"] = tone
        if use_guide and "style_guide" in st.session_state:
            options["styleGuide"] = st.session_state["style_guide"]

        with st.spinner(f"{action.value} ..."):
            result = asyncio.run(_client().call_api(text, action.value, options))

        if result.get("success"):
            st.session_state["last_result"] = result
        else:
            logger.error("Transform failed: %s", result.get("error"))
            st.error(result.get("error", "Transformation failed"))

    result = st.session_state.get("last_result")
    if result:
        st.subheader("Result")
        st.write(result["transformedText"])
        usage = result.get("usage")
        caption = f"{result.get('model')} · {result.get('timestamp')}"
        if usage:
            caption += f" · ~${usage['estimatedCostUsd']:.4f}"
        st.caption(caption)


# ---------------------------------------------------------------------------
# Mode B: Style Guide
# ---------------------------------------------------------------------------


def _mode_style_guide():
    st.header("Style Guide")
    st.markdown("Paste example copy; the relay derives a style guide from it.")

    example = st.text_area("Example text", height=240)
    extra = st.text_area("Additional instructions (optional)", height=80)

    if st.button("Generate", type="primary", disabled=not example.strip()):
        with st.spinner("Analysing style..."):
            result = asyncio.run(_client().generate_style_guide(example, extra))
        if result.get("success"):
            st.session_state["style_guide"] = {
                "comprehensiveGuide": result["comprehensiveGuide"],
                "conciseGuide": result.get("conciseGuide", ""),
            }
            st.session_state["style_guide_full"] = result.get("fullResponse", "")
        else:
            st.error(result.get("error", "Style guide generation failed"))

    guide = st.session_state.get("style_guide")
    if guide:
        tab_full, tab_concise = st.tabs(["Comprehensive", "Concise"])
        with tab_full:
            st.markdown(guide["comprehensiveGuide"])
        with tab_concise:
            st.markdown(guide["conciseGuide"] or "_no concise section in the response_")
        st.download_button(
            "Download full guide",
            data=st.session_state.get("style_guide_full", ""),
            file_name="style_guide.txt",
        )


if mode == "Transform":
    _mode_transform()
else:
    _mode_style_guide()
