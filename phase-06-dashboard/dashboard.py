import sys
import random
from pathlib import Path

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

# Path Resolution
PHASE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = PHASE_DIR.parent
for _p in [
    str(PROJECT_ROOT),
    str(PHASE_DIR),
    str(PROJECT_ROOT / "phase-00-orchestration"),
    str(PROJECT_ROOT / "phase-01-records"),
    str(PROJECT_ROOT / "phase-03-statistics"),
    str(PROJECT_ROOT / "phase-05-export"),
]:
    if _p not in sys.path:
        sys.path.insert(0, _p)

from config_loader import get_value, load_config                     # noqa: E402
from logger import get_logger                                         # noqa: E402
from mock_data import MOCK_INSIGHTS, MOCK_REVIEWS, MOCK_USER_INSIGHT, generate_metric_cards  # noqa: E402
from review_schema import ReviewFormData                              # noqa: E402
from review_session import ReviewSession                              # noqa: E402
from stats_calculator import rating_distribution                      # noqa: E402
from exporter import csv_bytes, pdf_bytes, prepare_data_for_export, xlsx_bytes  # noqa: E402

SENTIMENT_COLORS = {"positive": "#22c55e", "neutral": "#f59e0b", "negative": "#ef4444"}

# Page config
st.set_page_config(
    page_title="Fashion Feedback Analytics",
    page_icon="📊",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Custom CSS
st.markdown("""
    <style>
    .stMetric {
        background-color: #ffffff;
        padding: 15px;
        border-radius: 10px;
        border: 1px solid #e5e7eb;
    }
    .phrase {
        background: #f3f4f6;
        padding: 4px 10px;
        border-radius: 15px;
        font-size: 13px;
        margin-right: 6px;
    }
    </style>
    """, unsafe_allow_html=True)


@st.cache_data
def load_dashboard_config():
    return load_config()


def get_session(config) -> ReviewSession:
    """One ReviewSession per browser session, seeded with the mock data."""
    if "review_session" not in st.session_state:
        logger = get_logger(run_label="dashboard",
                            data_root=str(PROJECT_ROOT / get_value(config, "data_root", "data")),
                            level=get_value(config, "logging.level", "INFO"))
        st.session_state["review_session"] = ReviewSession(MOCK_REVIEWS, MOCK_INSIGHTS, logger=logger)
    return st.session_state["review_session"]


def open_detail(view):
    st.session_state["detail_view"] = view


@st.cache_data
def build_export_files(kind, rows, title):
    """CSV, PDF and Excel payloads for one row set, reused across reruns."""
    return csv_bytes(rows), pdf_bytes(rows, title), xlsx_bytes(rows)


def export_buttons(kind, records, title):
    rows = prepare_data_for_export(kind, records)
    if not rows:
        st.caption("Nothing to export.")
        return
    csv_file, pdf_file, xlsx_file = build_export_files(kind, rows, title)
    c1, c2, c3 = st.columns(3)
    c1.download_button("⬇️ CSV", csv_file, file_name=f"{kind}-report.csv",
                       mime="text/csv", use_container_width=True)
    c2.download_button("⬇️ PDF", pdf_file, file_name=f"{kind}-report.pdf",
                       mime="application/pdf", use_container_width=True)
    c3.download_button("⬇️ Excel", xlsx_file, file_name=f"{kind}-report.xlsx",
                       mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
                       use_container_width=True)


def render_review(review):
    with st.container(border=True):
        c1, c2 = st.columns([1, 4])
        with c1:
            st.image(review.image_url, use_container_width=True)
        with c2:
            st.markdown(f"#### {review.product_name}")
            st.caption(review.brand)
            st.write(review.comment)
            badge = {"positive": "green", "negative": "red"}.get(review.sentiment, "orange")
            verified = " · ✅ Verified Purchase" if review.purchase_verified else ""
            st.markdown(
                f"{'★' * review.rating}{'☆' * (5 - review.rating)} "
                f"**:{badge}[{review.sentiment}]**{verified}"
            )
            age = f"{review.user_age} years" if review.user_age else "N/A"
            st.caption(f"Category: {review.category} | Age Group: {age} | Date: {review.date}")


def review_form(session):
    with st.form("review_form", clear_on_submit=True):
        st.subheader("Submit New Review")
        product_name = st.text_input("Product Name")
        brand = st.text_input("Brand")
        category = st.selectbox("Category", session.categories, key="form_category")
        rating = st.slider("Rating", min_value=1, max_value=5, value=5)
        comment = st.text_area("Review")
        submitted = st.form_submit_button("Submit Review")

    if submitted:
        form = ReviewFormData(product_name=product_name, brand=brand,
                              category=category, rating=rating, comment=comment)
        try:
            record = session.submit(form)
        except ValueError as exc:
            st.error(str(exc))
            return
        st.session_state["show_form"] = False
        st.toast(f"Review added — sentiment: {record.sentiment}")
        st.rerun()


# ---------------------------------------------------------------------------
# Drill-down views
# ---------------------------------------------------------------------------

def detail_reviews(session, title):
    st.header("📝 All Reviews")
    query = st.text_input("Search reviews", key="detail_search")
    reviews = session.search(query)
    export_buttons("reviews", reviews, title)
    for review in reviews:
        render_review(review)


def detail_rating(session, title):
    st.header("⭐ Rating Breakdown")
    records = session.records
    if not records:
        st.warning("No reviews yet.")
        return
    dist = rating_distribution(records)
    df = pd.DataFrame({"Stars": [f"{s}★" for s in dist], "Reviews": list(dist.values())})
    fig = px.bar(df, x="Reviews", y="Stars", orientation="h", text="Reviews",
                 color_discrete_sequence=["#f59e0b"], title="Rating Distribution")
    fig.update_layout(plot_bgcolor='rgba(0,0,0,0)', paper_bgcolor='rgba(0,0,0,0)')
    st.plotly_chart(fig, use_container_width=True)
    export_buttons("rating", records, title)


def detail_sentiment(session, title):
    st.header("📈 Sentiment Breakdown")
    records = session.records
    if not records:
        st.warning("No reviews yet.")
        return
    df = pd.DataFrame([{"Sentiment": r.sentiment, "Category": r.category} for r in records])
    fig = px.pie(df, names="Sentiment", color="Sentiment",
                 color_discrete_map=SENTIMENT_COLORS, title="Overall Sentiment")
    st.plotly_chart(fig, use_container_width=True)
    st.dataframe(pd.crosstab(df["Category"], df["Sentiment"]), use_container_width=True)
    export_buttons("sentiment", records, title)


def detail_insights(title):
    st.header("👥 User Insights")
    ui = MOCK_USER_INSIGHT
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.subheader("Age Group Analysis")
        st.dataframe(pd.DataFrame([{"Range": g.range, "Rating": g.rating, "Users": g.count}
                                   for g in ui.age_groups]), hide_index=True)
    with c2:
        st.subheader("Time Spent")
        st.metric("Total (minutes)", f"{ui.time_spent_total:,}")
        st.metric("Average per Session", f"{ui.time_spent_average} min")
    with c3:
        st.subheader("Top Searches")
        st.dataframe(pd.DataFrame(ui.top_searches, columns=["Term", "Count"]), hide_index=True)
        st.metric("CTR", f"{ui.ctr}%")
    with c4:
        st.subheader("User Metrics")
        st.metric("Total Users", f"{ui.total_users:,}")
        st.metric("Returning Users", f"{ui.returning_users:,}")
        st.metric("Drop-offs", f"{ui.drop_offs:,}")
        st.metric("Successful Payments", f"{ui.successful_payments:,}")
        st.metric("Retention Rate", f"{ui.retention_rate}%")
    export_buttons("userInsights", [], title)


# ---------------------------------------------------------------------------
# Main page
# ---------------------------------------------------------------------------

def main():
    config = load_dashboard_config()
    title = get_value(config, "dashboard.title", "Fashion Feedback Analytics")
    pdf_title = get_value(config, "export.pdf_title", title)
    session = get_session(config)

    view = st.session_state.get("detail_view")
    if view:
        if st.button("← Back to Dashboard"):
            open_detail(None)
            st.rerun()
        {
            "reviews":   lambda: detail_reviews(session, pdf_title),
            "rating":    lambda: detail_rating(session, pdf_title),
            "sentiment": lambda: detail_sentiment(session, pdf_title),
            "insights":  lambda: detail_insights(pdf_title),
        }[view]()
        return

    head_l, head_r = st.columns([4, 1])
    head_l.title(f"👗 {title}")
    if head_r.button("➕ Add Review", use_container_width=True):
        st.session_state["show_form"] = not st.session_state.get("show_form", False)

    query = st.text_input("Search reviews, products, trends, or insights...", key="search")

    if st.session_state.get("show_form"):
        review_form(session)

    # Sidebar: facet filters
    records = session.records
    st.sidebar.header("Filters")
    brand = st.sidebar.selectbox("Brand", ["all", *sorted({r.brand for r in records})], key="facet_brand")
    category = st.sidebar.selectbox("Category", ["all", *session.categories], key="facet_category")
    rating = st.sidebar.selectbox("Rating", ["all", 5, 4, 3, 2, 1], key="facet_rating")
    date_range = st.sidebar.selectbox("Date Range", ["all", "today", "week", "month"], key="facet_date")

    # Stats Overview
    summary = session.summary()
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Total Reviews", summary.total_reviews)
        st.button("View reviews", key="open_reviews", on_click=open_detail, args=("reviews",))
    with col2:
        st.metric("Average Rating", "—" if summary.average_rating is None else f"{summary.average_rating:.1f}")
        st.button("View ratings", key="open_rating", on_click=open_detail, args=("rating",))
    with col3:
        st.metric("Sentiment Score", "—" if summary.sentiment_score is None else f"{summary.sentiment_score}%")
        st.button("View sentiment", key="open_sentiment", on_click=open_detail, args=("sentiment",))
    with col4:
        st.metric("User Insights", "View All")
        st.button("View insights", key="open_insights", on_click=open_detail, args=("insights",))

    # Randomised headline metrics
    seed = get_value(config, "mock.seed")
    cards = generate_metric_cards(random.Random(seed))
    for col, card in zip(st.columns(len(cards)), cards):
        col.metric(card["title"], card["value"], card["change"])

    st.markdown("---")

    # Category Insights
    st.header("Category Insights")
    insights = session.insights
    fig = go.Figure()
    for label in ("positive", "neutral", "negative"):
        fig.add_trace(go.Bar(
            y=[i.category for i in insights],
            x=[getattr(i.sentiment, label) for i in insights],
            name=label.capitalize(), orientation="h",
            marker_color=SENTIMENT_COLORS[label],
        ))
    fig.update_layout(barmode="stack", title="Sentiment Distribution (%)",
                      plot_bgcolor='rgba(0,0,0,0)', paper_bgcolor='rgba(0,0,0,0)')
    st.plotly_chart(fig, use_container_width=True)

    for insight in insights:
        phrases = "".join(f"<span class='phrase'>{p}</span>" for p in insight.common_phrases)
        st.markdown(f"**{insight.category}** · avg {insight.average_rating} ★ &nbsp; {phrases}",
                    unsafe_allow_html=True)

    st.markdown("---")

    # Recent Reviews
    st.header("Recent Reviews")
    shown = session.browse(query, brand=brand, category=category,
                           rating=rating, date_range=date_range)
    if not shown:
        st.info("No reviews match the current search and filters.")
    for review in shown:
        render_review(review)

    with st.expander("Export recent reviews"):
        export_buttons("reviews", shown, pdf_title)


if __name__ == "__main__":
    main()
