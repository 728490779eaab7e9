import streamlit as st
import httpx
import pandas as pd
from datetime import datetime
import logging
import altair as alt

from trademeter.config import app_config
from trademeter.services.formatting import html_text

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Configuration
BACKEND_URL = app_config.BACKEND_URL
ACCENT = "#9AC0DB"

HOME = "🏠 Home"
LOGIN = "🔑 Login"
REGISTER = "📝 Register"
SEARCH = "🔍 Search"
COMPANY = "🏢 Company"
PAGES = [HOME, LOGIN, REGISTER, SEARCH, COMPANY]

# Page config
st.set_page_config(
    page_title="Trade Meter AI",
    page_icon="📈",
    layout="wide"
)

st.markdown("""
<style>
.price-up { color: #00c853; }
.price-down { color: #ff1744; }
.accent { color: #9AC0DB; }
</style>
""", unsafe_allow_html=True)

# Initialize session state
if "nav" not in st.session_state:
    st.session_state.nav = HOME
    # Deep link: ?ticker=AAPL opens the company page on first load
    if st.query_params.get("ticker"):
        st.session_state.nav = COMPANY
        st.session_state.ticker = st.query_params["ticker"]

if "search_results" not in st.session_state:
    st.session_state.search_results = None

if "flash" not in st.session_state:
    st.session_state.flash = {}


def go_to(page: str, ticker: str = None):
    """Navigation callback; safe to change widget state here."""
    st.session_state.nav = page
    if ticker is not None:
        st.session_state.ticker = ticker


def post_json(path: str, payload: dict):
    """POST to the API; returns (status_code, body) or (None, None) on transport failure."""
    try:
        response = httpx.post(f"{BACKEND_URL}{path}", json=payload, timeout=10.0)
        return response.status_code, response.json()
    except Exception as e:
        logger.error(f"Error posting to {path}: {e}")
        return None, None


def fetch_search(query: str):
    """Search companies; returns (results, error_message)."""
    try:
        response = httpx.get(f"{BACKEND_URL}/api/v1/search", params={"q": query}, timeout=10.0)
        if response.status_code == 200:
            return response.json()["results"], None
        return [], response.json().get("detail", "Something went wrong. Please try again.")
    except Exception as e:
        logger.error(f"Search error: {e}")
        return [], "Something went wrong. Please try again."


def fetch_company(ticker: str):
    """Fetch the company view for a ticker."""
    try:
        response = httpx.get(f"{BACKEND_URL}/api/v1/companies/{ticker}", timeout=30.0)
        if response.status_code == 200:
            return response.json()
        return None
    except Exception as e:
        logger.error(f"Error fetching company {ticker}: {e}")
        return None


def submit_login():
    status, body = post_json("/api/v1/auth/login", {
        "email": st.session_state.login_email,
        "password": st.session_state.login_password,
    })
    if status == 200:
        st.session_state.flash["login"] = None
        go_to(SEARCH)
    else:
        st.session_state.flash["login"] = (body or {}).get("message") or (body or {}).get("detail") \
            or "Login failed. Please try again."


def submit_register():
    status, body = post_json("/api/v1/auth/register", {
        "first_name": st.session_state.reg_first_name,
        "last_name": st.session_state.reg_last_name,
        "email": st.session_state.reg_email,
        "password": st.session_state.reg_password,
        "confirm_password": st.session_state.reg_confirm_password,
    })
    st.session_state.flash["register"] = (body or {}).get("message") or (body or {}).get("detail") \
        or "Registration failed. Please try again."


def submit_search():
    query = st.session_state.search_query
    if not query:
        return
    results, error = fetch_search(query)
    st.session_state.search_results = results
    st.session_state.flash["search"] = error


def render_blocking_message(text: str, kind: str = "error"):
    """Terminal state with a path back to search."""
    getattr(st, kind)(text)
    st.button("← Back to Search", on_click=go_to, args=(SEARCH,), key="back_blocking")


def render_stat(label: str, value):
    st.markdown(f"""
    <div style="padding: 10px;">
        <p style="margin: 0; font-size: 13px; color: #888;">{html_text(label)}</p>
        <p style="margin: 4px 0 0 0; font-size: 18px; font-weight: 600;">{html_text(value)}</p>
    </div>
    """, unsafe_allow_html=True)


def render_chart(ticker: str, series):
    if not series or not series.get("labels") or len(series["labels"]) != len(series.get("prices", [])):
        st.info("Chart data not available.")
        return

    df = pd.DataFrame({"date": pd.to_datetime(series["labels"]), "close": series["prices"]})

    # Dynamic Y-axis with Altair
    y_min = df["close"].min() * 0.995
    y_max = df["close"].max() * 1.005

    chart = alt.Chart(df).mark_line(color=ACCENT).encode(
        x=alt.X("date:T", title="Date"),
        y=alt.Y("close:Q",
                title="Close ($)",
                scale=alt.Scale(domain=[y_min, y_max])),
        tooltip=["date:T", "close:Q"],
    ).properties(
        height=400,
        title=f"{ticker} Closing Price (Last {len(df)} Days)"
    ).interactive()

    st.altair_chart(chart, use_container_width=True)


# Sidebar
st.sidebar.title("📈 Trade Meter AI")
st.sidebar.markdown("Trade Smarter. Trade Better.")
page = st.sidebar.radio("Navigation", PAGES, key="nav")


# Page: Home
if page == HOME:
    st.title("Trade Smarter. Trade Better.")
    st.markdown(
        "The future of investing with AI-powered analysis. Get real-time insights, "
        "market predictions, and smarter decisions at your fingertips."
    )
    col1, col2, _ = st.columns([1, 1, 4])
    with col1:
        st.button("Register", on_click=go_to, args=(REGISTER,), type="primary")
    with col2:
        st.button("Login", on_click=go_to, args=(LOGIN,))


# Page: Login
elif page == LOGIN:
    st.title("Login to Your Account")
    with st.form("login_form"):
        st.text_input("Email", key="login_email")
        st.text_input("Password", type="password", key="login_password")
        st.form_submit_button("Login", on_click=submit_login, type="primary")

    if st.session_state.flash.get("login"):
        st.warning(st.session_state.flash["login"])


# Page: Register
elif page == REGISTER:
    st.title("Create an Account")
    with st.form("register_form"):
        st.text_input("First Name", key="reg_first_name")
        st.text_input("Last Name", key="reg_last_name")
        st.text_input("Email", key="reg_email")
        st.text_input("Password", type="password", key="reg_password")
        st.text_input("Confirm Password", type="password", key="reg_confirm_password")
        st.form_submit_button("Register", on_click=submit_register, type="primary")

    if st.session_state.flash.get("register"):
        st.info(st.session_state.flash["register"])


# Page: Search
elif page == SEARCH:
    st.title("Search Companies")
    st.text_input(
        "Company name or ticker",
        placeholder="Enter company name or ticker...",
        key="search_query",
        on_change=submit_search,
    )
    st.button("Search", on_click=submit_search, type="primary")

    error = st.session_state.flash.get("search")
    results = st.session_state.search_results

    if error:
        st.error(error)
    elif results is not None and not results and st.session_state.get("search_query"):
        st.caption("No results found.")

    for company in results or []:
        st.button(
            f"{company['name']} ({company['ticker']})",
            key=f"result_{company['ticker']}",
            on_click=go_to,
            args=(COMPANY, company["ticker"]),
            use_container_width=True,
        )


# Page: Company
elif page == COMPANY:
    ticker = st.sidebar.text_input("Ticker", key="ticker").strip().upper()

    if not ticker:
        render_blocking_message("Pick a company from the search page.", kind="info")
    else:
        with st.spinner(f"Loading {ticker}..."):
            view = fetch_company(ticker)

        state = view.get("state") if view else "error"

        if state == "config_error":
            render_blocking_message(f"Configuration error: {view.get('message')}")
        elif state == "not_found":
            render_blocking_message(view.get("message") or "Company data not found")
        elif state != "ready":
            render_blocking_message((view or {}).get("message") or "Failed to load company data.")
        else:
            profile = view["profile"]
            display = view.get("profile_display") or {}

            header_col, logo_col = st.columns([5, 1])
            with header_col:
                st.markdown(
                    f"# {html_text(profile['name'])} <span class='accent'>({html_text(ticker)})</span>",
                    unsafe_allow_html=True,
                )
                subtitle = " | ".join(p for p in (profile.get("industry"), profile.get("sector")) if p)
                if subtitle:
                    st.caption(subtitle)
            with logo_col:
                if profile.get("logo"):
                    st.image(profile["logo"], width=80)

            st.button("← Back to Search", on_click=go_to, args=(SEARCH,))

            if profile.get("description"):
                st.subheader("Company Overview")
                st.write(profile["description"])

            # Quote
            quote = view.get("quote_display")
            st.subheader("Quote")
            if quote:
                css = "price-up" if quote.get("change_style") == "positive" else "price-down"
                st.markdown(f"""
                <div style="padding: 15px; border: 1px solid #333; border-radius: 8px;">
                    <span style="font-size: 28px; font-weight: bold;">{html_text(quote['current'])}</span>
                    <span class="{css}" style="font-size: 16px; font-weight: 600; margin-left: 12px;">{html_text(quote['change'])}</span>
                </div>
                """, unsafe_allow_html=True)
                q1, q2, q3, q4 = st.columns(4)
                with q1:
                    render_stat("Open", quote["open"])
                with q2:
                    render_stat("High", quote["high"])
                with q3:
                    render_stat("Low", quote["low"])
                with q4:
                    render_stat("Previous Close", quote["previous_close"])
            else:
                st.info("Quote not available.")

            # Stats
            st.subheader("Key Stats")
            stats = [
                ("Market Cap", display.get("market_cap")),
                ("Shares Outstanding", display.get("shares_outstanding")),
                ("Exchange", profile.get("exchange")),
                ("IPO Date", profile.get("ipo")),
                ("Country", profile.get("country")),
                ("52 Week High", display.get("week_52_high")),
                ("52 Week Low", display.get("week_52_low")),
                ("Dividend Yield", profile.get("dividend_yield")),
                ("EPS", profile.get("eps")),
                ("PE Ratio", profile.get("pe_ratio")),
            ]
            cols = st.columns(3)
            for idx, (label, value) in enumerate(stats):
                with cols[idx % 3]:
                    render_stat(label, value)
            if profile.get("weburl"):
                st.markdown(f"[{profile['weburl']}]({profile['weburl']})")

            # Chart
            st.subheader("Stock Price Chart")
            render_chart(ticker, view.get("series"))

            # AI Analysis (not wired yet)
            st.markdown("---")
            st.button("Run AI Analysis", type="primary")


# Footer
st.sidebar.markdown("---")
st.sidebar.markdown("**Status**")
try:
    response = httpx.get(f"{BACKEND_URL}/health", timeout=5.0)
    if response.status_code == 200:
        health = response.json()
        st.sidebar.success("✅ Backend Online")
        st.sidebar.caption(f"Provider: {health.get('provider') or 'n/a'}")
    else:
        st.sidebar.error("❌ Backend Offline")
except Exception:
    st.sidebar.error("❌ Backend Unreachable")
st.sidebar.caption(f"© {datetime.now().year} Trade Meter AI. All rights reserved.")
