"""Hold'em Advisor: Streamlit simulator page."""

import sys, os
sys.path.insert(0, os.path.dirname(__file__))

import plotly.graph_objects as go
import streamlit as st

from holdem_advisor import config
from holdem_advisor.analysis.spot import SpotAnalyzer
from holdem_advisor.errors import HoldemAdvisorError
from holdem_advisor.models.card import card_options, format_cards
from holdem_advisor.models.position import Position
from holdem_advisor.models.simulation import SpotRequest

from theme import inject_theme, OUTCOME_COLORS, PLOTLY_LAYOUT

st.set_page_config(page_title="Poker Simulator", page_icon="♠", layout="wide")
inject_theme()

st.title("♠ Poker Simulator")
st.caption("Texas Hold'em simulator: estimate your win/tie/loss percentages "
           "and get a baseline move recommendation.")

CARD_CODES = [code for code, _ in card_options()]
CARD_LABELS = dict(card_options())
BOARD_SLOTS = ["Flop 1", "Flop 2", "Flop 3", "Turn", "River"]

# --- Hand ---
col1, col2 = st.columns(2)
with col1:
    hero_one = st.selectbox("Hero Card 1", CARD_CODES, index=CARD_CODES.index("As"),
                            format_func=CARD_LABELS.get)
with col2:
    hero_two = st.selectbox("Hero Card 2", CARD_CODES, index=CARD_CODES.index("Kh"),
                            format_func=CARD_LABELS.get)

board_cols = st.columns(len(BOARD_SLOTS))
board_codes = []
for col, slot in zip(board_cols, BOARD_SLOTS):
    with col:
        code = st.selectbox(slot, [""] + CARD_CODES,
                            format_func=lambda c: CARD_LABELS.get(c, "Unknown"))
        if code:
            board_codes.append(code)

# --- Table ---
c1, c2, c3 = st.columns(3)
with c1:
    opponents = st.number_input("Opponents", min_value=config.MIN_OPPONENTS,
                                max_value=config.MAX_OPPONENTS,
                                value=config.DEFAULT_OPPONENTS)
    position = st.selectbox("Table Position", list(Position),
                            index=list(Position).index(Position.parse(config.DEFAULT_POSITION)),
                            format_func=lambda p: p.label)
with c2:
    stack_bb = st.number_input("Stack (BB)", min_value=0.0, value=config.DEFAULT_STACK_BB)
    pot_size = st.number_input("Pot Size", min_value=0.0, value=config.DEFAULT_POT)
with c3:
    to_call = st.number_input("To Call", min_value=0.0, value=config.DEFAULT_TO_CALL)
    iterations = st.selectbox("Sim Iterations", config.ITERATION_CHOICES,
                              index=config.ITERATION_CHOICES.index(3000))

if st.button("Run Simulation", type="primary"):
    request = SpotRequest(
        hero_cards=[hero_one, hero_two],
        board_cards=board_codes,
        opponents=int(opponents),
        position=position,
        pot_size=pot_size,
        to_call=to_call,
        stack_bb=stack_bb,
        iterations=iterations,
    )
    try:
        with st.spinner("Dealing..."):
            analysis = SpotAnalyzer().analyze(request)
    except HoldemAdvisorError as e:
        st.error(str(e))
        st.stop()

    result = analysis.result
    st.markdown(f"Hero: **{format_cards(analysis.hero_cards)}** | "
                f"Board: **{format_cards(analysis.board_cards) or 'Unknown'}**")

    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Win", f"{result.win_pct:.1f}%")
    m2.metric("Tie", f"{result.tie_pct:.1f}%")
    m3.metric("Loss", f"{result.loss_pct:.1f}%")
    m4.metric("Equity", f"{result.equity_pct:.1f}%")

    summary = result.summary_dict()
    fig = go.Figure(go.Bar(
        x=list(summary.keys()), y=list(summary.values()),
        marker_color=OUTCOME_COLORS,
    ))
    fig.update_layout(**PLOTLY_LAYOUT, height=320, yaxis_title="Percent (%)")
    st.plotly_chart(fig, width="stretch")

    rec = analysis.recommendation
    st.subheader("Proper Move (Baseline)")
    st.markdown(f"**{rec.street.value}: {rec.action}**")
    st.write(rec.reason)
    st.caption(f"Based on {result.iterations:,} Monte Carlo iterations and current pot setup.")
