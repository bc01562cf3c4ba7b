"""
Complaint Report 관리 페이지
"""

import streamlit as st

from oripro_dashboard.forms import COMPLAINT_PRIORITY_LABELS, COMPLAINT_STATUS_LABELS, ComplaintReportForm
from oripro_dashboard.ui.components import CrudPage, field_error, load_options, select_index


def render_complaint_fields(ctx, item: dict, errors: dict) -> dict:
    tenants = load_options(ctx.api.tenants)
    tenant_ids = [''] + list(tenants.keys())

    title = st.text_input("Judul *", value=item.get('title') or '')
    field_error(errors, 'title')

    description = st.text_area("Deskripsi *", value=item.get('description') or '')
    field_error(errors, 'description')

    tenant_id = st.selectbox(
        "Tenant",
        options=tenant_ids,
        index=select_index(tenant_ids, str(item.get('tenant_id') or '')),
        format_func=lambda value: tenants.get(value, '-')
    )

    col1, col2 = st.columns(2)
    with col1:
        status_options = list(COMPLAINT_STATUS_LABELS.keys())
        status = st.selectbox(
            "Status",
            options=status_options,
            index=select_index(status_options, item.get('status', 0)),
            format_func=lambda value: COMPLAINT_STATUS_LABELS[value]
        )
    with col2:
        priority_options = list(COMPLAINT_PRIORITY_LABELS.keys())
        priority = st.selectbox(
            "Prioritas",
            options=priority_options,
            index=select_index(priority_options, item.get('priority', 1)),
            format_func=lambda value: COMPLAINT_PRIORITY_LABELS[value]
        )

    return {
        'title': title,
        'description': description,
        'tenant_id': tenant_id or None,
        'status': status,
        'priority': priority,
    }


def _with_labels(item: dict) -> dict:
    return {
        **item,
        'status_label': COMPLAINT_STATUS_LABELS.get(item.get('status'), '-'),
        'priority_label': COMPLAINT_PRIORITY_LABELS.get(item.get('priority'), '-'),
    }


PAGE = CrudPage(
    title="Laporan Keluhan",
    icon="📣",
    base_path="/complaint-reports",
    resource="complaint_reports",
    schema=ComplaintReportForm,
    columns={
        'title': 'Judul',
        'tenant.name': 'Tenant',
        'status_label': 'Status',
        'priority_label': 'Prioritas',
        'created_at': 'Dibuat',
    },
    detail_fields={
        'title': 'Judul',
        'description': 'Deskripsi',
        'tenant.name': 'Tenant',
        'reporter.name': 'Pelapor',
        'status_label': 'Status',
        'priority_label': 'Prioritas',
        'created_at': 'Dibuat',
    },
    render_fields=render_complaint_fields,
    search_param='title',
    item_label=lambda item: str(item.get('title') or item.get('id')),
    decorate_item=_with_labels,
)

render_list = PAGE.render_list
render_create = PAGE.render_create
render_edit = PAGE.render_edit
render_view = PAGE.render_view
