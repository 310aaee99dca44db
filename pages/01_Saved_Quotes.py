import streamlit as st
import pandas as pd

from windowquote.pricing import format_money
from windowquote.session import enter_page, get_controller, render_notification

st.set_page_config(page_title="Saved Quotes", page_icon="📂", layout="centered")
st.title("Saved Quotes")

controller = get_controller()
gateway = controller.gateway

# a confirmed load closes the list and returns to the counter
if controller.load_completed:
    controller.load_completed = False
    st.switch_page("app.py")

# the counter's button fetches before switching here; any other arrival refetches
if enter_page("saved_quotes") and not controller.quotes_view_open:
    controller.view_quotes()

render_notification(controller)

c1, c2 = st.columns([1, 3])
c1.button("🔄 Refresh", on_click=controller.view_quotes, disabled=gateway.is_loading)
c2.page_link("app.py", label="Back to the counter", icon="🪟")

quotes = gateway.saved_quotes
if not quotes:
    st.info("No saved quotes yet.")
    st.stop()

st.dataframe(pd.DataFrame([{
    "Name": q.name,
    "Saved": q.saved_at.strftime("%Y-%m-%d %H:%M"),
    "Total": q.total_cost,
    "Owner": q.owner_id,
} for q in quotes]), use_container_width=True, hide_index=True)

for q in quotes:
    with st.container(border=True):
        cols = st.columns([4, 2, 1, 1])
        cols[0].markdown(f"**{q.name}**  \n{q.saved_at:%Y-%m-%d %H:%M} UTC")
        cols[1].markdown(format_money(q.total_cost))
        cols[2].button("Load", key=f"load-{q.id}", on_click=controller.load_quote, args=(q,))
        cols[3].button("Delete", key=f"delete-{q.id}", on_click=controller.delete_quote, args=(q.id,))
