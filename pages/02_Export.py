import streamlit as st

from windowquote.export import generate_quote_pdf, generate_quote_xlsx, quote_frame
from windowquote.pricing import format_money
from windowquote.session import enter_page, get_controller

st.set_page_config(page_title="Export", page_icon="📄", layout="centered")
st.title("Export Quote")

controller = get_controller()
enter_page("export")
controller.close_quotes_view()
items = [it for it in controller.editor.items if it.count > 0]

title = st.text_input("Title", value="")
if not items:
    st.info("Nothing counted yet. Add some windows on the counter page.")
    st.stop()

st.dataframe(quote_frame(items), use_container_width=True, hide_index=True)
st.metric("Total", format_money(controller.editor.total_cost))

c1, c2 = st.columns(2)
c1.download_button(
    label="📄 Download PDF",
    data=generate_quote_pdf(items, title=title),
    file_name="quote.pdf",
    mime="application/pdf",
)
c2.download_button(
    label="📊 Download Excel",
    data=generate_quote_xlsx(items, title=title),
    file_name="quote.xlsx",
    mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
)
