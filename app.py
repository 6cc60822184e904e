import logging

import streamlit as st

from charts import create_sensitivity_chart, create_tax_comparison_chart
from config import (
    BASE_PRICE, HOLDING_YEARS, INDEXATION_RATE, NEW_TAX_RATE, OLD_TAX_RATE,
    PRICE_MULTIPLIER, Parameters,
)
from tax_calculator import (
    compute_crossover_sensitivity, compute_series, find_crossover, format_inr,
    series_to_frame, summarize,
)

logger = logging.getLogger(__name__)

# =============================================================================
# CONFIGURATION
# =============================================================================
st.set_page_config(
    page_title="India Real Estate Tax Comparison",
    page_icon="🏠",
    layout="wide"
)

# =============================================================================
# STYLES
# =============================================================================
st.markdown("""
<style>
    .main { background-color: #f8f9fa; }

    [data-testid="stMetricValue"] { color: #1f1f1f !important; font-weight: 600; }
    [data-testid="stMetricLabel"] { color: #4b4b4b !important; }
    .stMetric {
        background-color: #ffffff;
        padding: 15px;
        border-radius: 10px;
        box-shadow: 0 2px 4px rgba(0,0,0,0.05);
        border: 1px solid #e0e0e0;
    }

    .crossover-box {
        background: linear-gradient(135deg, #eb3349 0%, #f45c43 100%);
        color: white;
        padding: 25px;
        border-radius: 15px;
        margin: 20px 0;
        text-align: center;
    }
    .crossover-box h2 { color: white; margin: 0; }

    .regime-box {
        background: linear-gradient(135deg, #11998e 0%, #38ef7d 100%);
        color: white;
        padding: 25px;
        border-radius: 15px;
        margin: 20px 0;
        text-align: center;
    }
    .regime-box h2 { color: white; margin: 0; }
</style>
""", unsafe_allow_html=True)


# =============================================================================
# CACHED CALCULATIONS
# =============================================================================
cached_series = st.cache_data(compute_series)
cached_sensitivity = st.cache_data(compute_crossover_sensitivity)


# =============================================================================
# SIDEBAR
# =============================================================================
with st.sidebar:
    st.title("⚙️ Parameters")

    price_multiplier = st.slider(
        "Final Price Multiplier (x)",
        min_value=PRICE_MULTIPLIER.min_value,
        max_value=PRICE_MULTIPLIER.max_value,
        value=PRICE_MULTIPLIER.default,
        step=PRICE_MULTIPLIER.step,
        help="Sell price as a multiple of the purchase price"
    )
    indexation_rate = st.slider(
        "Annual Indexation Rate (%)",
        min_value=INDEXATION_RATE.min_value,
        max_value=INDEXATION_RATE.max_value,
        value=INDEXATION_RATE.default,
        step=INDEXATION_RATE.step,
        help="Yearly growth of the indexed purchase price under the old regime"
    )
    holding_years = st.slider(
        "Holding Period (years)",
        min_value=int(HOLDING_YEARS.min_value),
        max_value=int(HOLDING_YEARS.max_value),
        value=int(HOLDING_YEARS.default),
        step=int(HOLDING_YEARS.step),
    )

    st.divider()
    st.caption(f"Base property value: {format_inr(BASE_PRICE)} (1 Crore)")


# =============================================================================
# MAIN PAGE
# =============================================================================
st.title("🏠 India Real Estate Tax Comparison")
st.markdown("**Old regime (20% with indexation) vs new regime (12.5% flat) on long-term capital gains.**")

params = Parameters(price_multiplier, indexation_rate, holding_years)
problems = params.errors()
if problems:
    for problem in problems:
        st.error(problem)
    st.stop()

# Run calculations
logger.info(
    "Recomputing: multiplier=%.2f rate=%.1f%% years=%d",
    params.price_multiplier, params.indexation_rate, params.holding_years
)
series = cached_series(params.price_multiplier, params.indexation_rate, params.holding_years)
crossover = find_crossover(series)
summary = summarize(series, crossover)
df = series_to_frame(series)

start_row = series[0]
final_row = series[-1]

# =============================================================================
# SUMMARY METRICS
# =============================================================================
st.markdown("---")
col_m1, col_m2, col_m3, col_m4 = st.columns(4)

with col_m1:
    st.metric("Sell Price", format_inr(start_row.sell_price), help="Base price × multiplier")
with col_m2:
    st.metric("New Tax (any year)", format_inr(start_row.new_tax))
with col_m3:
    st.metric(
        f"Old Tax at Year {final_row.year}",
        format_inr(final_row.old_tax),
        delta=format_inr(final_row.old_tax - start_row.old_tax),
        delta_color="inverse",
        help=f"Old tax at year 0: {format_inr(start_row.old_tax)}"
    )
with col_m4:
    st.metric("Crossover Year", f"Year {crossover.year}" if crossover is not None else "None")

# =============================================================================
# MAIN CHART
# =============================================================================
st.plotly_chart(create_tax_comparison_chart(df, crossover), use_container_width=True)

st.caption("""
Graph shows tax amounts and indexed cost over the selected holding period.
Adjust sliders to see how final price multiplier, indexation rate, and holding period affect taxes.
""")

# =============================================================================
# KEY INSIGHT
# =============================================================================
if summary.has_crossover:
    st.markdown(f"""
    <div class="crossover-box">
        <h3 style="margin:0; color: rgba(255,255,255,0.9);">⚖️ CROSSOVER POINT</h3>
        <h2>{summary.year} years</h2>
        <p>From here on the new flat tax costs more than the old indexed tax.</p>
    </div>
    """, unsafe_allow_html=True)

    col_c1, col_c2, col_c3, col_c4 = st.columns(4)
    with col_c1:
        st.metric("Sell Price", format_inr(summary.sell_price))
    with col_c2:
        st.metric("Indexed Cost", format_inr(summary.indexed_cost))
    with col_c3:
        st.metric("Old Tax", format_inr(summary.old_tax))
    with col_c4:
        st.metric("New Tax", format_inr(summary.new_tax))
else:
    regime_label = "OLD REGIME" if summary.favored_regime == "old" else "NEW REGIME"
    st.markdown(f"""
    <div class="regime-box">
        <h3 style="margin:0; color: rgba(255,255,255,0.9);">✅ NO CROSSOVER</h3>
        <h2>{regime_label}</h2>
        <p>{summary.message}</p>
    </div>
    """, unsafe_allow_html=True)

# =============================================================================
# TABS
# =============================================================================
st.markdown("---")
tabs = st.tabs(["🔍 Sensitivity", "📑 Data"])

with tabs[0]:
    st.subheader("🔍 Crossover vs Indexation Rate")
    st.markdown("""
    How the crossover year moves as the indexation rate changes, keeping the
    price multiplier and holding period fixed. Gaps mean the new regime never
    costs more within the horizon.
    """)

    rates, crossover_years = cached_sensitivity(params.price_multiplier, params.holding_years)
    st.plotly_chart(
        create_sensitivity_chart(rates, crossover_years, params.indexation_rate),
        use_container_width=True
    )

with tabs[1]:
    st.subheader("📑 Complete Data Table")
    st.dataframe(df, use_container_width=True, hide_index=True)

    csv = df.to_csv(index=False)
    st.download_button(
        label="📥 Download as CSV",
        data=csv,
        file_name="india_real_estate_tax_comparison.csv",
        mime="text/csv"
    )

# =============================================================================
# FOOTER
# =============================================================================
st.markdown("---")
st.markdown("**Tax Calculation Formulas:**")
st.markdown(f"""
- Old Tax = Max(0, (Sell Price - Indexed Cost)) × {OLD_TAX_RATE:.0%}
- New Tax = Max(0, (Sell Price - Purchase Price) × {NEW_TAX_RATE:.1%})
- Indexed Cost = Purchase Price × (1 + Indexation Rate)^Years
""")
st.caption("""
**Glossary:**
- **Indexation:** Inflating the purchase price over time, which lowers the taxable gain under the old regime
- **Capital Gain:** Sell price minus cost basis, floored at zero
- **Crossover Point:** First year in which the new flat tax exceeds the old indexed tax
- **Flat Rate:** Rate applied to the raw, unindexed gain
""")
