"""Health Myth Buster - Streamlit UI."""

import asyncio

import streamlit as st

from myth_buster.functions.myth_checker import LANGUAGES, run_myth_checker
from myth_buster.models import Verdict

VERDICT_STYLES = {
    Verdict.TRUE: {"color": "green", "icon": "✅"},
    Verdict.FALSE: {"color": "red", "icon": "⚠️"},
    Verdict.MIXED: {"color": "orange", "icon": "ℹ️"},
    Verdict.DEPENDS: {"color": "blue", "icon": "❓"},
}

EXAMPLES = [
    ("Can I drink coffee?", "Moderate amounts (200mg/day) are usually considered safe."),
    ("Is spicy food dangerous?", "Safe for baby, but might cause you severe heartburn."),
]

st.set_page_config(
    page_title="Health Myth Buster",
    page_icon="⚡",
    layout="centered",
)

st.title("⚡ Health Myth Buster")
st.markdown("Instant, offline verification of common health claims and Old Wives' tales.")

if "statement" not in st.session_state:
    st.session_state.statement = ""


def _set_statement(text: str) -> None:
    st.session_state.statement = text
    st.session_state.pop("check", None)


# Sidebar
with st.sidebar:
    st.header("⚙️ Settings")
    use_llm = st.checkbox("Ask Claude when offline check has no match", value=True)
    show_trace = st.checkbox("Show Check Trace", value=False)
    locale = st.selectbox(
        "Answer language",
        list(LANGUAGES),
        format_func=LANGUAGES.get,
        help="Language used when Claude answers an unmatched statement.",
    )

statement = st.text_area(
    "Statement to verify",
    key="statement",
    placeholder="e.g., Can spicy food cause a miscarriage?",
    height=140,
)

col1, col2 = st.columns([3, 1])
with col1:
    check = st.button("✨ Check Myth", type="primary", disabled=not statement.strip())
with col2:
    st.button("Reset", on_click=_set_statement, args=("",))

if check:
    with st.spinner("Checking..."):
        st.session_state.check = asyncio.run(run_myth_checker(statement, use_llm=use_llm, locale=locale))

outcome = st.session_state.get("check")
if outcome is not None:
    result = outcome.result
    style = VERDICT_STYLES[result.verdict]

    st.markdown(f"## {style['icon']} :{style['color']}[{result.verdict.value}!]")
    st.caption("Expert Analysis Result")
    st.markdown(f'> "{result.explanation}"')
    st.caption(f"🛡️ {result.source_label}")

    advice_col, warning_col = st.columns(2)
    with advice_col:
        st.markdown("**🛡️ Safe Advice**")
        for advice in result.safe_advice:
            st.markdown(f"- {advice}")
    with warning_col:
        st.markdown("**🩺 Clinical Warning**")
        for warning in result.escalation_signs:
            st.markdown(f"- {warning}")

    with st.expander("Copy result"):
        st.code(result.share_text(outcome.statement), language=None)

    if show_trace:
        st.json(outcome.trace.model_dump())

st.divider()
st.caption("ℹ️ General guidance, not a diagnosis. For urgent symptoms contact clinical services.")

st.markdown("**Try an example:**")
for question, answer in EXAMPLES:
    st.button(question, key=question, help=answer, on_click=_set_statement, args=(question,))
