"""
Unit 관리 페이지
"""

import streamlit as st

from oripro_dashboard.forms import UnitForm
from oripro_dashboard.ui.components import CrudPage, field_error, load_options, select_index

ELECTRICAL_UNITS = ['Watt', 'kVA', 'Ampere']


def render_unit_fields(ctx, item: dict, errors: dict) -> dict:
    """Unit 폼 필드"""
    assets = load_options(ctx.api.assets)
    asset_ids = list(assets.keys())

    name = st.text_input("Nama Unit *", value=item.get('name') or '')
    field_error(errors, 'name')

    asset_id = st.selectbox(
        "Asset *",
        options=asset_ids,
        index=select_index(asset_ids, str(item.get('asset_id') or '')),
        format_func=lambda value: assets.get(value, value),
        placeholder="Pilih asset"
    )
    field_error(errors, 'asset_id')

    col1, col2 = st.columns(2)
    with col1:
        size = st.number_input("Luas (m²) *", min_value=0.0, value=float(item.get('size') or 0))
        field_error(errors, 'size')
    with col2:
        rent_price = st.number_input("Harga Sewa *", min_value=0.0, value=float(item.get('rent_price') or 0), step=100000.0)
        field_error(errors, 'rent_price')

    col1, col2 = st.columns(2)
    with col1:
        lamp = st.number_input("Jumlah Lampu", min_value=0, value=int(item.get('lamp') or 0))
    with col2:
        electrical_socket = st.number_input("Jumlah Stop Kontak", min_value=0, value=int(item.get('electrical_socket') or 0))

    col1, col2 = st.columns(2)
    with col1:
        electrical_power = st.number_input("Daya Listrik *", min_value=0.0, value=float(item.get('electrical_power') or 0))
        field_error(errors, 'electrical_power')
    with col2:
        electrical_unit = st.selectbox(
            "Satuan Daya",
            options=ELECTRICAL_UNITS,
            index=select_index(ELECTRICAL_UNITS, item.get('electrical_unit'))
        )

    is_toilet_exist = st.checkbox("Ada Toilet", value=bool(item.get('is_toilet_exist')))
    description = st.text_area("Deskripsi", value=item.get('description') or '')

    return {
        'name': name,
        'asset_id': asset_id or '',
        'size': size,
        'rent_price': rent_price,
        'lamp': lamp,
        'electrical_socket': electrical_socket,
        'electrical_power': electrical_power,
        'electrical_unit': electrical_unit,
        'is_toilet_exist': is_toilet_exist,
        'description': description or None,
    }


PAGE = CrudPage(
    title="Unit",
    icon="🏢",
    base_path="/unit",
    resource="units",
    schema=UnitForm,
    columns={
        'name': 'Nama',
        'asset.name': 'Asset',
        'size': 'Luas (m²)',
        'rent_price': 'Harga Sewa',
        'electrical_power': 'Daya',
        'electrical_unit': 'Satuan',
    },
    detail_fields={
        'name': 'Nama',
        'asset.name': 'Asset',
        'size': 'Luas (m²)',
        'rent_price': 'Harga Sewa',
        'lamp': 'Lampu',
        'electrical_socket': 'Stop Kontak',
        'electrical_power': 'Daya',
        'electrical_unit': 'Satuan',
        'is_toilet_exist': 'Toilet',
        'description': 'Deskripsi',
    },
    render_fields=render_unit_fields,
)

render_list = PAGE.render_list
render_create = PAGE.render_create
render_edit = PAGE.render_edit
render_view = PAGE.render_view
