"""
Tenant 관리 페이지

임대 계약 CRUD와 임대료 납부(결제 이력/보증금 이력) 화면입니다.
"""

from datetime import date

import pandas as pd
import streamlit as st

from oripro_dashboard.forms import DURATION_UNIT_LABELS, TenantForm, TenantPaymentForm, validate_form
from oripro_dashboard.log.logger import setup_logger
from oripro_dashboard.ui.components import CrudPage, field_error, load_options, render_empty, select_index
from oripro_dashboard.ui.session_state import navigate_to

logger = setup_logger('TenantsPage')

TENANT_CATEGORIES = {
    1: 'Restoran/Kafe',
    2: 'Retail',
    3: 'Kantor',
    4: 'Hiburan',
    5: 'Lainnya',
}

PAYMENT_METHODS = ['transfer', 'cash', 'virtual_account']


def _parse_date(value) -> date:
    if isinstance(value, date):
        return value
    if value:
        try:
            return date.fromisoformat(str(value)[:10])
        except ValueError:
            logger.warning(f"Invalid contract date: {value}")
    return date.today()


def _upload(ctx, uploaded_files, file_type: str) -> list:
    """업로드한 파일을 서버에 올리고 URL 목록 반환"""
    urls = []
    for uploaded in uploaded_files or []:
        result = ctx.api.tenants.upload_file(uploaded.name, uploaded.getvalue(), file_type)
        if result.success and isinstance(result.data, dict) and result.data.get('url'):
            urls.append(result.data['url'])
        else:
            ctx.notifier.api_error(result, f"Gagal mengunggah {uploaded.name}")
    return urls


def render_tenant_fields(ctx, item: dict, errors: dict) -> dict:
    """Tenant 폼 필드"""
    users = load_options(ctx.api.users)
    units = load_options(ctx.api.units)
    user_ids = list(users.keys())

    name = st.text_input("Nama Tenant *", value=item.get('name') or '')
    field_error(errors, 'name')

    user_id = st.selectbox(
        "User *",
        options=user_ids,
        index=select_index(user_ids, str(item.get('user_id') or '')),
        format_func=lambda value: users.get(value, value)
    )
    field_error(errors, 'user_id')

    col1, col2, col3 = st.columns(3)
    with col1:
        contract_begin_at = st.date_input("Mulai Kontrak *", value=_parse_date(item.get('contract_begin_at')))
        field_error(errors, 'contract_begin_at')
    with col2:
        rent_duration = st.number_input("Durasi Sewa *", min_value=0, value=int(item.get('rent_duration') or 1))
        field_error(errors, 'rent_duration')
    with col3:
        unit_options = list(DURATION_UNIT_LABELS.keys())
        rent_duration_unit = st.selectbox(
            "Satuan",
            options=unit_options,
            index=select_index(unit_options, item.get('rent_duration_unit')),
            format_func=lambda value: DURATION_UNIT_LABELS[value]
        )

    current_units = [str(unit_id) for unit_id in item.get('unit_ids') or [] if str(unit_id) in units]
    unit_ids = st.multiselect(
        "Unit *",
        options=list(units.keys()),
        default=current_units,
        format_func=lambda value: units.get(value, value)
    )
    field_error(errors, 'unit_ids')

    categories = st.multiselect(
        "Kategori *",
        options=list(TENANT_CATEGORIES.keys()),
        default=[c for c in item.get('categories') or [] if c in TENANT_CATEGORIES],
        format_func=lambda value: TENANT_CATEGORIES[value]
    )
    field_error(errors, 'categories')

    identifications = st.file_uploader("Identitas Tenant *", accept_multiple_files=True)
    field_error(errors, 'tenant_identifications')
    contracts = st.file_uploader("Dokumen Kontrak *", accept_multiple_files=True)
    field_error(errors, 'contract_documents')

    return {
        'name': name,
        'user_id': user_id or '',
        'contract_begin_at': contract_begin_at,
        'rent_duration': rent_duration,
        'rent_duration_unit': rent_duration_unit,
        'tenant_identifications': list(item.get('tenant_identifications') or []),
        'contract_documents': list(item.get('contract_documents') or []),
        'unit_ids': unit_ids,
        'categories': categories,
        'identification_files': identifications,
        'contract_files': contracts,
    }


def prepare_tenant_values(ctx, values: dict) -> dict:
    """새로 선택한 파일을 업로드하고 문서 URL 목록을 교체 (새 파일이 없으면 기존 문서 유지)"""
    values = dict(values)
    identifications = values.pop('identification_files', None)
    contracts = values.pop('contract_files', None)
    if identifications:
        values['tenant_identifications'] = _upload(ctx, identifications, 'identification')
    if contracts:
        values['contract_documents'] = _upload(ctx, contracts, 'contract')
    return values


def _with_labels(item: dict) -> dict:
    unit = DURATION_UNIT_LABELS.get(item.get('rent_duration_unit'), item.get('rent_duration_unit') or '')
    return {**item, 'duration_label': f"{item.get('rent_duration') or '-'} {unit}".strip()}


PAGE = CrudPage(
    title="Tenant",
    icon="🏢",
    base_path="/tenants",
    resource="tenants",
    schema=TenantForm,
    columns={
        'name': 'Nama',
        'user.name': 'User',
        'contract_begin_at': 'Mulai Kontrak',
        'duration_label': 'Durasi',
        'status': 'Status',
    },
    detail_fields={
        'name': 'Nama',
        'user.name': 'User',
        'user.email': 'Email',
        'contract_begin_at': 'Mulai Kontrak',
        'contract_end_at': 'Akhir Kontrak',
        'duration_label': 'Durasi',
        'status': 'Status',
    },
    render_fields=render_tenant_fields,
    decorate_item=_with_labels,
    prepare_values=prepare_tenant_values,
    extra_actions={"💳 Pembayaran": "/payment/{id}"},
)

render_list = PAGE.render_list
render_create = PAGE.render_create
render_edit = PAGE.render_edit
render_view = PAGE.render_view


def render_payment_page(ctx, id: str):
    """Tenant 납부 화면"""
    st.title("💳 Pembayaran Tenant")

    tenant = PAGE.load_item(ctx, id)
    if tenant is None:
        return
    st.subheader(tenant.get('name') or id)

    tab1, tab2, tab3 = st.tabs(["📋 Riwayat Pembayaran", "🏦 Riwayat Deposit", "➕ Bayar"])

    with tab1:
        _render_logs(ctx, ctx.api.tenants.payment_logs(id), "Belum ada pembayaran.")

    with tab2:
        _render_logs(ctx, ctx.api.tenants.deposit_logs(id), "Belum ada deposit.")

    with tab3:
        if ctx.capabilities().can_add:
            _render_payment_form(ctx, id)
        else:
            st.info("Anda tidak memiliki izin untuk menambah pembayaran.")

    if st.button("← Kembali", key="back_tenant_payment"):
        navigate_to('/tenants')


def _render_logs(ctx, result, empty_message: str):
    if not result.success:
        ctx.notifier.api_error(result, "Gagal memuat riwayat")
        render_empty("Riwayat tidak dapat dimuat.")
        return
    items = result.items()
    if not items:
        render_empty(empty_message)
        return
    st.dataframe(pd.DataFrame(items), use_container_width=True, hide_index=True)


def submit_payment(ctx, tenant_id: str, values: dict):
    """
    납부 등록

    Returns:
        (성공 여부, 필드별 오류)
    """
    form, errors = validate_form(TenantPaymentForm, values)
    if not form:
        return False, errors

    result = ctx.api.tenants.create_payment(tenant_id, form.to_payload())
    if not result.success:
        ctx.notifier.api_error(result, "Gagal menyimpan pembayaran")
        return False, {}

    logger.info(f"Payment recorded for tenant {tenant_id}")
    ctx.notifier.success("Pembayaran berhasil disimpan")
    return True, {}


def _render_payment_form(ctx, tenant_id: str):
    errors = st.session_state.form_errors.get('form_tenant_payment', {})

    with st.form("form_tenant_payment"):
        amount = st.number_input("Jumlah *", min_value=0.0, step=100000.0)
        field_error(errors, 'amount')
        payment_date = st.date_input("Tanggal Bayar *", value=date.today())
        payment_method = st.selectbox("Metode *", options=PAYMENT_METHODS)
        notes = st.text_area("Catatan")
        submitted = st.form_submit_button("💾 Simpan")

    if submitted:
        _, errors = submit_payment(ctx, tenant_id, {
            'amount': amount,
            'payment_date': payment_date,
            'payment_method': payment_method,
            'notes': notes or None,
        })
        st.session_state.form_errors['form_tenant_payment'] = errors
        st.rerun()
