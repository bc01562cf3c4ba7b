"""
대시보드 차트

백엔드 대시보드 데이터로 Plotly 그림을 만듭니다.
데이터가 비어 있으면 None을 반환하고 호출 측에서 빈 상태를 표시합니다.
"""

from typing import List, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go


def _frame(rows: Optional[List[dict]], required: List[str]) -> Optional[pd.DataFrame]:
    if not rows:
        return None
    df = pd.DataFrame(rows)
    if any(column not in df.columns for column in required):
        return None
    return df


def revenue_growth_figure(rows: Optional[List[dict]]) -> Optional[go.Figure]:
    """
    월별 매출 추이 선 그래프

    Args:
        rows: [{'month': '2024-01', 'revenue': 1000000}, ...]
    """
    df = _frame(rows, ['month', 'revenue'])
    if df is None:
        return None
    df['revenue'] = pd.to_numeric(df['revenue'], errors='coerce').fillna(0)
    fig = px.line(df, x='month', y='revenue', markers=True, title="Pertumbuhan Pendapatan")
    fig.update_layout(xaxis_title=None, yaxis_title="Pendapatan (Rp)")
    return fig


def complaint_status_figure(rows: Optional[List[dict]]) -> Optional[go.Figure]:
    """
    상태별 민원 수 막대 그래프

    Args:
        rows: [{'status': 'pending', 'count': 3}, ...]
    """
    df = _frame(rows, ['status', 'count'])
    if df is None:
        return None
    fig = px.bar(df, x='status', y='count', color='status', title="Laporan Keluhan")
    fig.update_layout(showlegend=False, xaxis_title=None, yaxis_title=None)
    return fig


def task_completion_figure(rows: Optional[List[dict]]) -> Optional[go.Figure]:
    """
    일별 작업 완료율 그래프

    Args:
        rows: [{'date': '2024-01-01', 'completed': 8, 'total': 10}, ...]
    """
    df = _frame(rows, ['date', 'completed', 'total'])
    if df is None:
        return None
    total = pd.to_numeric(df['total'], errors='coerce').fillna(0)
    completed = pd.to_numeric(df['completed'], errors='coerce').fillna(0)
    # total이 0인 날은 0%
    df['completion_rate'] = (completed / total.where(total > 0)).fillna(0) * 100

    fig = px.bar(df, x='date', y='completion_rate', title="Penyelesaian Tugas Harian")
    fig.update_layout(xaxis_title=None, yaxis_title="%", yaxis_range=[0, 100])
    return fig
