"""Plotly figures and table rows for the dashboard."""
import random
from typing import Any, Dict, List, Optional
import plotly.graph_objects as go

TABLE_HEADERS = ["ID", "Title", "Description", "Price", "Category", "Sold"]


def random_color(rng: Optional[random.Random] = None) -> str:
    rng = rng or random
    return "#{:06x}".format(rng.randint(0, 0xFFFFFF))


def bar_chart_figure(data: Dict[str, int]) -> go.Figure:
    """Items per price range."""
    fig = go.Figure(go.Bar(x=list(data.keys()), y=list(data.values()), marker_color="#8884d8"))
    fig.update_layout(title="Bar Chart", xaxis_title="Prices", yaxis_title="Items")
    return fig


def pie_chart_figure(data: Dict[str, int], rng: Optional[random.Random] = None) -> go.Figure:
    """Items per category; each slice gets a random colour."""
    labels = list(data.keys())
    fig = go.Figure(
        go.Pie(
            labels=labels,
            values=list(data.values()),
            marker={"colors": [random_color(rng) for _ in labels]},
            texttemplate="%{label}: %{value}",
        )
    )
    fig.update_layout(title="Pie Chart")
    return fig


def table_rows(transactions: List[Dict[str, Any]]) -> List[List[Any]]:
    return [
        [
            tx.get("id"),
            tx.get("title"),
            tx.get("description"),
            f"${tx.get('price')}",
            tx.get("category"),
            "Yes" if tx.get("sold") else "No",
        ]
        for tx in transactions
    ]


def statistics_markdown(month: str, statistics: Dict[str, Any]) -> str:
    return "\n".join([
        f"## Statistics for {month}",
        f"- **Total Sales:** ${statistics.get('totalSales', 0)}",
        f"- **Sold Items:** {statistics.get('soldItems', 0)}",
        f"- **Unsold Items:** {statistics.get('unsoldItems', 0)}",
    ])
