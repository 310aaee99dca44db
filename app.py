import streamlit as st

from windowquote.pricing import format_money
from windowquote.session import enter_page, get_controller, render_notification

# ----------------- UI CONFIG -----------------
st.set_page_config(page_title="Window Counter", page_icon="🪟", layout="centered")
st.title("🪟 Window Counter")

# ----------------- STATE -----------------
controller = get_controller()
editor = controller.editor
gateway = controller.gateway

# set by the "View Saved Quotes" callback once the list has been fetched
if st.session_state.pop("open_saved_quotes", False):
    st.switch_page("pages/01_Saved_Quotes.py")
enter_page("counter")
controller.close_quotes_view()

render_notification(controller)


# ----------------- CALLBACKS -----------------
def _sync_draft():
    editor.draft_name = st.session_state.get("new_window_name", "")
    editor.draft_price = st.session_state.get("new_window_price", "")


def _add_window():
    _sync_draft()
    if controller.add_window_type(editor.draft_name, editor.draft_price) is not None:
        st.session_state.new_window_name = editor.draft_name
        st.session_state.new_window_price = editor.draft_price


def _cancel_add():
    editor.close_add_form()
    st.session_state.new_window_name = ""
    st.session_state.new_window_price = ""


def _open_edit(item_id):
    session = editor.open_edit(item_id)
    if session is not None:
        st.session_state.edit_name = session.name
        st.session_state.edit_price = session.price


def _save_edit():
    controller.save_edit(st.session_state.get("edit_name", ""), st.session_state.get("edit_price", ""))


def _save_quote():
    if controller.save_quote(st.session_state.get("quote_name", "")) is not None:
        st.session_state.quote_name = ""


def _view_quotes():
    if controller.view_quotes():
        st.session_state.open_saved_quotes = True


# ----------------- ADD WINDOW TYPE -----------------
if not editor.add_form_open:
    st.button("➕ Create New Window Type", on_click=editor.open_add_form, use_container_width=True)
else:
    c1, c2 = st.columns([3, 2])
    c1.text_input("Window name", key="new_window_name", placeholder="Enter Window Name", on_change=_sync_draft)
    c2.text_input("Initial price", key="new_window_price", placeholder="e.g. 150.00", on_change=_sync_draft)
    b1, b2, _ = st.columns([1, 1, 3])
    b1.button("Add Window", type="primary", on_click=_add_window)
    b2.button("Cancel", key="cancel-add", on_click=_cancel_add)

# ----------------- EDIT WINDOW TYPE -----------------
if editor.edit_session is not None:
    with st.container(border=True):
        st.markdown("**Edit Window Type**")
        c1, c2 = st.columns([3, 2])
        c1.text_input("Window name", key="edit_name")
        c2.text_input("Price", key="edit_price")
        b1, b2, _ = st.columns([1, 1, 3])
        b1.button("Save Changes", type="primary", on_click=_save_edit)
        b2.button("Cancel", key="cancel-edit", on_click=editor.cancel_edit)

# ----------------- WINDOW TYPES -----------------
if not editor.items:
    st.info("No window types yet. Create one to get started.")
else:
    last = len(editor.items) - 1
    for idx, wt in enumerate(editor.items):
        picked = editor.picked_id == wt.id
        with st.container(border=True):
            cols = st.columns([4, 1, 1, 1, 1, 1, 1, 1, 1])
            label = f"**{wt.name}**  \n{format_money(wt.price)} each"
            cols[0].markdown(f"✋ {label}" if picked else label)
            cols[1].button("−", key=f"dec-{wt.id}", on_click=editor.decrement_count, args=(wt.id,))
            cols[2].markdown(f"### {wt.count}")
            cols[3].button("+", key=f"inc-{wt.id}", on_click=editor.increment_count, args=(wt.id,))
            cols[4].button("✏️", key=f"edit-{wt.id}", help="Edit Window Type", on_click=_open_edit, args=(wt.id,))
            cols[5].button("🗑️", key=f"del-{wt.id}", help="Delete Window Type",
                           on_click=controller.delete_window_type, args=(wt.id,))
            cols[6].button("↑", key=f"up-{wt.id}", disabled=idx == 0,
                           on_click=editor.move_item, args=(idx, idx - 1))
            cols[7].button("↓", key=f"down-{wt.id}", disabled=idx == last,
                           on_click=editor.move_item, args=(idx, idx + 1))
            if editor.picked_id is None:
                cols[8].button("✋", key=f"pick-{wt.id}", help="Pick up to move",
                               on_click=editor.pick_up, args=(wt.id,))
            elif picked:
                cols[8].button("✖", key=f"release-{wt.id}", help="Put back", on_click=editor.release)
            else:
                cols[8].button("📍", key=f"drop-{wt.id}", help="Move here",
                               on_click=editor.drop_on, args=(wt.id,))

# ----------------- TOTAL -----------------
st.metric("Total Cost", format_money(editor.total_cost))

# ----------------- SAVE / LOAD -----------------
c1, c2 = st.columns(2)
c1.button("💾 Save Quote", on_click=controller.open_save_dialog,
          disabled=gateway.is_saving, use_container_width=True)
c2.button("📂 View Saved Quotes", key="view-quotes", on_click=_view_quotes,
          disabled=gateway.is_loading, use_container_width=True)

if controller.save_dialog_open:
    with st.container(border=True):
        st.markdown("**Save Current Quote**")
        st.text_input("Quote name", key="quote_name", placeholder="e.g. Job 12")
        b1, b2, _ = st.columns([1, 1, 3])
        b1.button("Save", type="primary", disabled=gateway.is_saving, on_click=_save_quote)
        b2.button("Cancel", key="cancel-save", on_click=controller.close_save_dialog)

st.markdown("---")
user_id = gateway.gate.user_id
st.caption(f"User ID: {user_id}" if user_id else "Signing in…")
