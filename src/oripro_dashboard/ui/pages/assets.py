"""
Asset 관리 페이지
"""

import streamlit as st

from oripro_dashboard.forms import ASSET_TYPE_LABELS, AssetForm
from oripro_dashboard.ui.components import CrudPage, field_error, select_index

STATUS_LABELS = {1: 'Aktif', 0: 'Tidak Aktif'}


def render_asset_fields(ctx, item: dict, errors: dict) -> dict:
    """Asset 폼 필드"""
    col1, col2 = st.columns(2)
    with col1:
        name = st.text_input("Nama Asset *", value=item.get('name') or '')
        field_error(errors, 'name')
    with col2:
        code = st.text_input("Kode Asset", value=item.get('code') or '')
        field_error(errors, 'code')

    description = st.text_area("Deskripsi", value=item.get('description') or '')

    col1, col2 = st.columns(2)
    with col1:
        type_options = list(ASSET_TYPE_LABELS.keys())
        asset_type = st.selectbox(
            "Tipe Asset *",
            options=type_options,
            index=select_index(type_options, item.get('asset_type')),
            format_func=lambda value: ASSET_TYPE_LABELS[value]
        )
        field_error(errors, 'asset_type')
    with col2:
        status_options = list(STATUS_LABELS.keys())
        status = st.selectbox(
            "Status",
            options=status_options,
            index=select_index(status_options, item.get('status', 1)),
            format_func=lambda value: STATUS_LABELS[value]
        )

    address = st.text_area("Alamat *", value=item.get('address') or '')
    field_error(errors, 'address')

    area = st.number_input("Luas Area (m²) *", min_value=0.0, value=float(item.get('area') or 0))
    field_error(errors, 'area')

    col1, col2 = st.columns(2)
    with col1:
        longitude = st.number_input("Longitude", value=float(item.get('longitude') or 0), format="%.6f")
        field_error(errors, 'longitude')
    with col2:
        latitude = st.number_input("Latitude", value=float(item.get('latitude') or 0), format="%.6f")
        field_error(errors, 'latitude')

    return {
        'name': name,
        'code': code or None,
        'description': description or None,
        'asset_type': asset_type,
        'status': status,
        'address': address,
        'area': area,
        'longitude': longitude,
        'latitude': latitude,
    }


def _with_labels(item: dict) -> dict:
    return {
        **item,
        'asset_type_label': ASSET_TYPE_LABELS.get(item.get('asset_type'), '-'),
        'status_label': STATUS_LABELS.get(item.get('status'), '-'),
    }


PAGE = CrudPage(
    title="Asset",
    icon="📦",
    base_path="/asset",
    resource="assets",
    schema=AssetForm,
    columns={
        'code': 'Kode',
        'name': 'Nama',
        'asset_type_label': 'Tipe',
        'address': 'Alamat',
        'area': 'Luas (m²)',
        'status_label': 'Status',
    },
    detail_fields={
        'code': 'Kode',
        'name': 'Nama',
        'description': 'Deskripsi',
        'asset_type_label': 'Tipe',
        'address': 'Alamat',
        'area': 'Luas (m²)',
        'latitude': 'Latitude',
        'longitude': 'Longitude',
        'status_label': 'Status',
    },
    render_fields=render_asset_fields,
    decorate_item=_with_labels,
)

render_list = PAGE.render_list
render_create = PAGE.render_create
render_edit = PAGE.render_edit
render_view = PAGE.render_view
