"""Plotly 图表工厂"""
import math
from typing import Dict, List

import plotly.graph_objects as go
import plotly.express as px
import plotly.io as pio
import pandas as pd

from config.settings import COLORS
from data_manager.schema import ChartDataPoint, EscrowItems

# 自定义 Plotly 主题
pio.templates["mortgage_light"] = go.layout.Template(
    layout=go.Layout(
        font=dict(family="sans-serif", color="#333"),
        title_font=dict(size=20, color="#333"),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        xaxis=dict(
            gridcolor="#e0e0e0",
            linecolor="#e0e0e0",
            zerolinecolor="#e0e0e0",
            tickfont=dict(color="#666"),
            title_font=dict(color="#666"),
        ),
        yaxis=dict(
            gridcolor="#e0e0e0",
            linecolor="#e0e0e0",
            zerolinecolor="#e0e0e0",
            tickfont=dict(color="#666"),
            title_font=dict(color="#666"),
        ),
        legend=dict(
            font=dict(color="#666"),
            bgcolor="rgba(255,255,255,0.5)",
            bordercolor="#e0e0e0",
            borderwidth=1,
        ),
        colorway=px.colors.qualitative.Plotly,
    )
)

# 设置默认主题
pio.templates.default = "mortgage_light"


def _periods(points: List[ChartDataPoint]) -> List[int]:
    return [p.period for p in points]


def _year_axis(last_period: int) -> dict:
    """横轴按期数取值，刻度标为「Year N」（每期一个点，不会重复）"""
    years = max(1, math.ceil(last_period / 12))
    step = max(1, math.ceil(years / 15))
    ticks = list(range(step, years + 1, step))
    return dict(
        title="Year",
        tickmode="array",
        tickvals=[y * 12 for y in ticks],
        ticktext=[f"Year {y}" for y in ticks],
        tickangle=45,
        range=[0, last_period + 1],
    )


def _line_layout(fig: go.Figure, title: str, template: str, last_period: int):
    fig.update_layout(
        title=title,
        yaxis_title="Amount ($)",
        hovermode="x unified",
        margin=dict(t=60, b=60, l=60, r=20),
        height=400,
        xaxis=_year_axis(last_period),
        template=template,
    )


def create_payment_breakdown_pie(
    monthly_principal_and_interest: float,
    escrow: EscrowItems,
    template: str = "mortgage_light",
) -> go.Figure:
    """月供构成环形图：本息 + 各项税费"""
    labels = ["Principal & Interest", "Property Tax", "Home Insurance", "PMI", "HOA Fees"]
    values = [
        monthly_principal_and_interest,
        escrow.property_tax / 12,
        escrow.home_insurance / 12,
        escrow.pmi / 12,
        escrow.hoa_fees / 12,
    ]
    # 只显示非零项
    pairs = [(label, v) for label, v in zip(labels, values) if v > 0]
    fig = go.Figure(data=[go.Pie(
        labels=[p[0] for p in pairs],
        values=[p[1] for p in pairs],
        hole=0.45,
        textinfo="label+percent",
        textposition="outside",
        hovertemplate="%{label}: $%{value:,.2f}<extra></extra>",
    )])
    fig.update_layout(
        title="Monthly Payment Breakdown",
        showlegend=True,
        margin=dict(t=60, b=20, l=20, r=20),
        height=400,
        template=template,
    )
    return fig


def create_principal_interest_line(points: List[ChartDataPoint], template: str = "mortgage_light") -> go.Figure:
    """每期本金/利息趋势"""
    fig = go.Figure()
    x = _periods(points)

    fig.add_trace(go.Scatter(
        x=x,
        y=[p.principal for p in points],
        mode="lines",
        name="Principal Payment",
        line=dict(color=COLORS["principal"], width=2, shape="spline"),
        hovertemplate="Payment %{x}<br>Principal: $%{y:,.2f}<extra></extra>",
    ))

    fig.add_trace(go.Scatter(
        x=x,
        y=[p.interest for p in points],
        mode="lines",
        name="Interest Payment",
        line=dict(color=COLORS["interest"], width=2, shape="spline"),
        hovertemplate="Payment %{x}<br>Interest: $%{y:,.2f}<extra></extra>",
    ))

    _line_layout(fig, "Principal vs Interest Over Time", template, points[-1].period if points else 12)
    return fig


def create_balance_bar(points: List[ChartDataPoint], template: str = "mortgage_light") -> go.Figure:
    """剩余本金柱状图"""
    fig = go.Figure(data=[go.Bar(
        x=_periods(points),
        y=[p.balance for p in points],
        name="Remaining Balance",
        marker_color=COLORS["balance"],
        hovertemplate="Payment %{x}<br>Balance: $%{y:,.2f}<extra></extra>",
    )])
    fig.update_layout(
        title="Remaining Loan Balance",
        xaxis=_year_axis(points[-1].period if points else 12),
        yaxis_title="Balance ($)",
        margin=dict(t=60, b=60, l=60, r=20),
        height=400,
        template=template,
    )
    return fig


def create_balance_comparison_line(
    series: Dict[str, List[ChartDataPoint]],
    title: str = "Loan Balance Comparison",
    template: str = "mortgage_light",
) -> go.Figure:
    """多笔贷款剩余本金叠加折线图，series: {名称: 抽样后的数据点}"""
    fig = go.Figure()
    palette = [COLORS["current"], COLORS["new"], COLORS["primary"], COLORS["escrow"]]

    for i, (name, points) in enumerate(series.items()):
        fig.add_trace(go.Scatter(
            x=_periods(points),
            y=[p.balance for p in points],
            mode="lines",
            name=name,
            line=dict(color=palette[i % len(palette)], width=2),
            hovertemplate="Payment %{x}<br>$%{y:,.2f}<extra></extra>",
        ))

    last_period = max((pts[-1].period for pts in series.values() if pts), default=12)
    _line_layout(fig, title, template, last_period)
    return fig


def create_comparison_bar(comparison_df: pd.DataFrame, template: str = "mortgage_light") -> go.Figure:
    """当前贷款 vs 新贷款柱状图（只取金额类指标）"""
    money = comparison_df[comparison_df["metric"].isin(["Total Interest", "Total Payments"])]
    fig = go.Figure()

    fig.add_trace(go.Bar(
        name="Current Mortgage",
        x=money["metric"],
        y=money["current"],
        marker_color=COLORS["current"],
    ))

    fig.add_trace(go.Bar(
        name="New Mortgage",
        x=money["metric"],
        y=money["new"],
        marker_color=COLORS["new"],
    ))

    fig.update_layout(
        title="Cost Comparison",
        barmode="group",
        yaxis_title="Amount ($)",
        margin=dict(t=60, b=40, l=60, r=20),
        height=400,
        template=template,
    )
    return fig
