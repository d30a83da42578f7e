"""
Patient Registration Form - Streamlit Host

Renders the registration form and binds every control to a FormSession
through a FormSurface backed by st.session_state.

Tech: Streamlit (zero frontend code needed)
Run: streamlit run app.py
"""

from datetime import date
from typing import Any, Optional

import streamlit as st

from regform.config.constants import COUNTER_STYLES, SECRET_FIELD, CounterTone, FieldKind, FormButton
from regform.models.form_state import ReviewSummary
from regform.surface.base import FormSurface
from regform.utils.error_handler import field_not_found_error
from regform.validation import FormSession, FieldRule, get_rule_loader

# ==============================================================================
# PAGE CONFIGURATION
# ==============================================================================

st.set_page_config(
    page_title="Patient Registration",
    page_icon="📝",
    layout="centered",
)

# Controls rendered as multi-line or hidden text
TEXT_AREA_FIELDS = {"current_symptoms"}
PASSWORD_FIELDS = {"password", "confirm_password"}


# ==============================================================================
# SURFACE
# ==============================================================================

class StreamlitFormSurface(FormSurface):
    """FormSurface whose controls and slots live in st.session_state."""

    def __init__(self):
        self.rule_loader = get_rule_loader()
        state = st.session_state
        state.setdefault("error_slots", {})
        state.setdefault("counter", ("", CounterTone.NEUTRAL))
        state.setdefault("buttons", {FormButton.SUBMIT: False, FormButton.VALIDATE: True})
        state.setdefault("focus", None)
        state.setdefault("review", None)
        state.setdefault("alert", None)

    @staticmethod
    def key(field_name: str) -> str:
        return f"field_{field_name}"

    def has_field(self, field_name: str) -> bool:
        return self.rule_loader.has_field(field_name)

    def read(self, field_name: str) -> Any:
        if not self.has_field(field_name):
            raise field_not_found_error(field_name)
        return st.session_state.get(self.key(field_name))

    def write(self, field_name: str, value: Any) -> None:
        if not self.has_field(field_name):
            raise field_not_found_error(field_name)
        st.session_state[self.key(field_name)] = value

    def is_required(self, field_name: str) -> bool:
        return self.rule_loader.is_required(field_name)

    def render_field_error(self, field_name: str, message: Optional[str]) -> None:
        st.session_state.error_slots[field_name] = message

    def render_counter(self, text: str, tone: CounterTone) -> None:
        st.session_state.counter = (text, tone)

    def set_button_visible(self, button: FormButton, visible: bool) -> None:
        st.session_state.buttons[button] = visible

    def focus(self, field_name: str) -> None:
        st.session_state.focus = field_name

    def render_review(self, summary: Optional[ReviewSummary]) -> None:
        st.session_state.review = summary

    def show_alert(self, message: str) -> None:
        st.session_state.alert = message


def get_session() -> FormSession:
    """Get the form session for this browser tab."""
    if "form_session" not in st.session_state:
        st.session_state.form_session = FormSession(StreamlitFormSurface())
    return st.session_state.form_session


# ==============================================================================
# CALLBACKS
# ==============================================================================

def on_change(field_name: str):
    session = get_session()
    raw = st.session_state.get(StreamlitFormSurface.key(field_name))
    session.on_field_changed(field_name, raw)


def on_ssn_change():
    """Feed a committed SSN edit to the masker one typed character at a time."""
    session = get_session()
    raw = st.session_state.get(StreamlitFormSurface.key(SECRET_FIELD)) or ""
    shown = session.ssn_display
    if len(raw) > len(shown) + 1 and raw.startswith(shown):
        for char in raw[len(shown):]:
            session.on_field_changed(SECRET_FIELD, session.ssn_display + char)
    else:
        session.on_field_changed(SECRET_FIELD, raw)


def on_submit():
    st.session_state.alert = None
    result = get_session().on_submit_requested()
    st.session_state.submitted = result.accepted


def on_reset():
    session = get_session()
    session.reset()
    session.close_review()
    for key in list(st.session_state.keys()):
        if key.startswith("field_"):
            del st.session_state[key]
    st.session_state.focus = None
    st.session_state.alert = None
    st.session_state.submitted = False


# ==============================================================================
# RENDERING
# ==============================================================================

def render_control(rule: FieldRule):
    name = rule.field_name
    key = StreamlitFormSurface.key(name)
    label = f"{rule.label} *" if rule.required else rule.label

    if rule.members:
        st.markdown(f"**{rule.label}**")
        for member_name, member_label in rule.members.items():
            st.checkbox(member_label, key=StreamlitFormSurface.key(member_name),
                        on_change=on_change, args=(member_name,))
    elif rule.kind == FieldKind.SECRET:
        st.text_input(label, key=key, on_change=on_ssn_change, placeholder="XXX-XX-XXXX")
    elif rule.kind == FieldKind.RADIO_GROUP:
        st.radio(label, rule.options, index=None, key=key, horizontal=True,
                 on_change=on_change, args=(name,))
    elif rule.kind == FieldKind.SELECT:
        st.selectbox(label, rule.options, index=None, key=key, on_change=on_change, args=(name,))
    elif rule.kind == FieldKind.CHECKBOX:
        st.checkbox(label, key=key, on_change=on_change, args=(name,))
    elif name == "date_of_birth":
        min_date, max_date = FormSession.date_of_birth_limits()
        st.date_input(label, value=None, key=key,
                      min_value=date.fromisoformat(min_date), max_value=date.fromisoformat(max_date),
                      on_change=on_change, args=(name,))
    elif name in TEXT_AREA_FIELDS:
        st.text_area(label, key=key, on_change=on_change, args=(name,))
    else:
        st.text_input(label, key=key, on_change=on_change, args=(name,),
                      type="password" if name in PASSWORD_FIELDS else "default")

    message = st.session_state.error_slots.get(name)
    if message:
        st.error(message)


def render_counter():
    text, tone = st.session_state.counter
    style = COUNTER_STYLES[tone]
    weight = "bold" if style["bold"] else "normal"
    st.markdown(
        f"<p style='color:{style['color']};font-weight:{weight}'>{text}</p>",
        unsafe_allow_html=True,
    )


def render_review(summary: ReviewSummary):
    st.subheader("Review")
    for section, entries in summary.by_section().items():
        st.markdown(f"**{section}**")
        for entry in entries:
            if entry.status is None:
                status = ""
            else:
                status = "✅" if entry.status == "pass" else f"❌ {entry.status}"
            st.markdown(f"- {entry.label}: `{entry.display_value}` {status}")
    st.button("Close review", on_click=get_session().close_review)


# ==============================================================================
# PAGE
# ==============================================================================

session = get_session()

st.title("📝 Patient Registration")

current_section = None
for field_rule in get_rule_loader().get_all_rules().values():
    if field_rule.section != current_section:
        current_section = field_rule.section
        st.header(current_section.value)
    render_control(field_rule)

st.divider()
render_counter()

buttons = st.session_state.buttons
col_validate, col_review, col_submit, col_reset = st.columns(4)
with col_validate:
    if buttons.get(FormButton.VALIDATE):
        st.button("VALIDATE", on_click=session.on_validate_all_requested)
with col_review:
    st.button("REVIEW", on_click=session.on_review_requested)
with col_submit:
    if buttons.get(FormButton.SUBMIT):
        st.button("SUBMIT", type="primary", on_click=on_submit)
with col_reset:
    st.button("RESET", on_click=on_reset)

if st.session_state.focus:
    st.info(f"First error: {get_rule_loader().get_rule(st.session_state.focus).label}")

if st.session_state.alert:
    st.error(st.session_state.alert)

if st.session_state.get("submitted"):
    st.success("Registration submitted.")

if st.session_state.review is not None:
    render_review(st.session_state.review)
