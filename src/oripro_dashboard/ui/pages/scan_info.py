"""
Scan Info 관리 페이지

작업 위치 확인용 QR/스캔 코드와 좌표입니다.
"""

import streamlit as st

from oripro_dashboard.forms import ScanInfoForm
from oripro_dashboard.ui.components import CrudPage, field_error, load_options, select_index


def render_scan_info_fields(ctx, item: dict, errors: dict) -> dict:
    assets = load_options(ctx.api.assets)
    asset_ids = list(assets.keys())

    scan_code = st.text_input("Scan Code *", value=item.get('scan_code') or '')
    field_error(errors, 'scan_code')

    asset_id = st.selectbox(
        "Asset *",
        options=asset_ids,
        index=select_index(asset_ids, str(item.get('asset_id') or '')),
        format_func=lambda value: assets.get(value, value)
    )
    field_error(errors, 'asset_id')

    col1, col2 = st.columns(2)
    with col1:
        latitude = st.number_input("Latitude *", value=float(item.get('latitude') or 0), format="%.6f")
        field_error(errors, 'latitude')
    with col2:
        longitude = st.number_input("Longitude *", value=float(item.get('longitude') or 0), format="%.6f")
        field_error(errors, 'longitude')

    return {
        'scan_code': scan_code,
        'asset_id': asset_id or '',
        'latitude': latitude,
        'longitude': longitude,
    }


PAGE = CrudPage(
    title="Scan Info",
    icon="📍",
    base_path="/scan-info",
    resource="scan_info",
    schema=ScanInfoForm,
    columns={
        'scan_code': 'Scan Code',
        'asset.name': 'Asset',
        'latitude': 'Latitude',
        'longitude': 'Longitude',
    },
    render_fields=render_scan_info_fields,
    search_param='scan_code',
    item_label=lambda item: str(item.get('scan_code') or item.get('id')),
)

render_list = PAGE.render_list
render_create = PAGE.render_create
render_edit = PAGE.render_edit
