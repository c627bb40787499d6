import plotly.express as px
import plotly.graph_objects as go
import pandas as pd

COLORS = {
    "Oral": "#2563eb",
    "Written": "#22d3ee",
    "Both": "#f59e0b",
}


def average_bar(avg_df: pd.DataFrame, title: str = "Average scores by assessment type") -> go.Figure:
    if avg_df.empty:
        return go.Figure()
    fig = px.bar(
        avg_df,
        x="name",
        y="average",
        color="name",
        color_discrete_map=COLORS,
        title=title,
        labels={"name": "Assessment type", "average": "Average score"},
    )
    fig.update_layout(yaxis_range=[0, 100], showlegend=False, bargap=0.35)
    return fig


def preference_pie(share_df: pd.DataFrame, title: str = "Preferred assessment type", percent: bool = False) -> go.Figure:
    if share_df.empty:
        return go.Figure()
    fig = px.pie(share_df, names="name", values="value", color="name", color_discrete_map=COLORS, title=title)
    if percent:
        fig.update_traces(texttemplate="%{label}: %{value:.1f}%", hovertemplate="%{label}: %{value:.1f}%<extra></extra>")
    return fig
