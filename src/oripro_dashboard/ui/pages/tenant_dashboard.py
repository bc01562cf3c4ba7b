"""
테넌트 대시보드 페이지

임대 계약 상태(활성/만료 예정/만료), 유닛 임대 현황, 임대료 합계를 표시합니다.
"""

from datetime import date
from typing import List, Optional

import pandas as pd
import streamlit as st

from oripro_dashboard.log.logger import setup_logger
from oripro_dashboard.ui.components import render_empty
from oripro_dashboard.ui.session_state import AppContext, navigate_to

logger = setup_logger('TenantDashboardPage')

# 계약 종료까지 남은 일수가 이 값 이하이면 만료 예정
EXPIRING_WITHIN_DAYS = 30

CONTRACT_STATUS_LABELS = {
    'active': '🟢 Aktif',
    'expiring': '🟡 Akan Kadaluarsa',
    'expired': '🔴 Kadaluarsa',
    'unknown': '⚪ Tidak diketahui',
}


def contract_status(tenant: dict, today: date) -> str:
    """
    계약 상태

    Returns:
        'active', 'expiring', 'expired', 종료일이 없으면 'unknown'
    """
    end_date = _parse_date(tenant.get('contract_end_at'))
    if end_date is None:
        return 'unknown'
    remaining = (end_date - today).days
    if remaining < 0:
        return 'expired'
    if remaining <= EXPIRING_WITHIN_DAYS:
        return 'expiring'
    return 'active'


def _parse_date(value) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        logger.warning(f"Invalid contract end date: {value}")
        return None


def tenant_units(tenant: dict, units: List[dict]) -> List[dict]:
    """테넌트가 임대한 유닛 (units가 없으면 unit_ids로 찾음)"""
    if tenant.get('units'):
        return tenant['units']
    unit_ids = {str(unit_id) for unit_id in tenant.get('unit_ids') or []}
    return [unit for unit in units if str(unit.get('id')) in unit_ids]


def tenant_statistics(tenants: List[dict], units: List[dict], today: date) -> dict:
    """테넌트/유닛 요약 통계"""
    statuses = [contract_status(tenant, today) for tenant in tenants]

    rented_unit_ids = set()
    total_revenue = 0.0
    for tenant in tenants:
        rented = tenant_units(tenant, units)
        rented_unit_ids.update(str(unit.get('id')) for unit in rented)
        total_revenue += sum(float(unit.get('rent_price') or 0) for unit in rented)

    total_tenants = len(tenants)
    return {
        'total_tenants': total_tenants,
        'active_contracts': statuses.count('active'),
        'expiring_contracts': statuses.count('expiring'),
        'expired_contracts': statuses.count('expired'),
        'total_units': len(units),
        'rented_units': len(rented_unit_ids),
        'available_units': max(len(units) - len(rented_unit_ids), 0),
        'total_revenue': total_revenue,
        'average_revenue': total_revenue / total_tenants if total_tenants else 0.0,
    }


def format_rupiah(amount: float) -> str:
    return f"Rp {amount:,.0f}".replace(',', '.')


def render_tenant_dashboard(ctx: AppContext):
    """테넌트 대시보드 페이지 렌더링"""
    col1, col2 = st.columns([5, 1])
    with col1:
        st.title("🧾 Dashboard Tenant")
        st.caption("Informasi unit yang disewa dan kontrak kerjasama")
    with col2:
        if st.button("🔄 Refresh", key='refresh_tenant_dashboard', use_container_width=True):
            st.rerun()

    with st.spinner("Memuat data tenant..."):
        tenants = ctx.api.tenants.list()
        units = ctx.api.units.list()
        assets = ctx.api.assets.list()

    for result, label in ((tenants, 'tenant'), (units, 'unit'), (assets, 'asset')):
        if not result.success:
            ctx.notifier.api_error(result, f"Gagal memuat data {label}")

    today = date.today()
    stats = tenant_statistics(tenants.items(), units.items(), today)

    columns = st.columns(4)
    cards = [
        ("Total Tenant", str(stats['total_tenants'])),
        ("Kontrak Aktif", str(stats['active_contracts'])),
        ("Akan Kadaluarsa", str(stats['expiring_contracts'])),
        ("Total Pendapatan", format_rupiah(stats['total_revenue'])),
    ]
    for column, (label, value) in zip(columns, cards):
        with column:
            st.metric(label, value)

    columns = st.columns(3)
    with columns[0]:
        st.metric("Total Unit", stats['total_units'])
    with columns[1]:
        st.metric("Unit Disewa", stats['rented_units'])
    with columns[2]:
        st.metric("Unit Tersedia", stats['available_units'])

    st.markdown("---")
    st.subheader("📄 Status Kontrak Kerjasama")
    if not tenants.items():
        render_empty("Belum ada data tenant")
        if st.button("Tambah Tenant Pertama", key='tenant_dashboard_create'):
            navigate_to('/tenants/create')
        return

    asset_names = {str(asset.get('id')): asset.get('name') for asset in assets.items()}
    rows = []
    for tenant in tenants.items():
        rented = tenant_units(tenant, units.items())
        rows.append({
            'Tenant': tenant.get('name'),
            'Unit': ', '.join(str(unit.get('name')) for unit in rented) or '-',
            'Asset': ', '.join(sorted({str(asset_names.get(str(unit.get('asset_id')), '-')) for unit in rented})) or '-',
            'Berakhir': str(tenant.get('contract_end_at') or '-')[:10],
            'Status': CONTRACT_STATUS_LABELS[contract_status(tenant, today)],
        })
    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)
