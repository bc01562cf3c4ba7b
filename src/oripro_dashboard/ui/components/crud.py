"""
공통 CRUD 화면

목록/생성/수정/상세 화면을 리소스마다 같은 방식으로 구성합니다.
추가/수정/삭제 버튼은 현재 경로의 메뉴 권한이 있을 때만 표시됩니다.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Type

import pandas as pd
import streamlit as st
from pydantic import BaseModel

from oripro_dashboard.api import ResourceApi
from oripro_dashboard.forms import FORM_ERROR_KEY, validate_form
from oripro_dashboard.log.logger import setup_logger
from oripro_dashboard.ui.components.empty_state import render_empty, render_not_found
from oripro_dashboard.ui.session_state import AppContext, navigate_to

logger = setup_logger('CrudPage')


def get_value(item: dict, key: str) -> Any:
    """점(.)으로 구분된 키로 중첩 값 조회 (예: 'asset.name')"""
    value: Any = item
    for part in key.split('.'):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


def to_table(items: List[dict], columns: Dict[str, str]) -> pd.DataFrame:
    """
    목록 데이터를 표시용 DataFrame으로 변환

    Args:
        items: API 목록 항목
        columns: {키: 컬럼 제목} (표시 순서)

    Returns:
        columns 순서의 DataFrame (항목이 없으면 컬럼만 있는 빈 DataFrame)
    """
    rows = [{title: get_value(item, key) for key, title in columns.items()} for item in items]
    return pd.DataFrame(rows, columns=list(columns.values()))


def field_error(errors: dict, name: str):
    """필드 아래에 검증 오류 표시"""
    if name in errors:
        st.caption(f":red[{errors[name]}]")


def load_options(resource: ResourceApi, label_key: str = 'name', **params) -> Dict[str, str]:
    """
    선택 상자용 {id: 이름} 목록

    실패하면 빈 딕셔너리를 반환합니다.
    """
    result = resource.list(**params)
    if not result.success:
        logger.warning(f"Failed to load options from {resource.base_path}: {result.error}")
        return {}
    return {str(item['id']): str(item.get(label_key) or item['id']) for item in result.items() if 'id' in item}


def select_index(options: list, value) -> int:
    """선택 상자의 기본 인덱스 (값이 없으면 0)"""
    try:
        return options.index(value)
    except ValueError:
        return 0


FieldRenderer = Callable[[AppContext, dict, dict], dict]


@dataclass
class CrudPage:
    """
    리소스 CRUD 화면

    Attributes:
        title: 리소스 이름 (예: 'Asset')
        icon: 제목 아이콘
        base_path: 목록 경로 (예: '/asset')
        resource: BackendApi의 리소스 속성 이름 (예: 'assets')
        schema: 폼 검증 스키마
        columns: 목록 컬럼 {키: 제목}
        render_fields: 폼 필드를 그리고 입력 값을 반환하는 함수 (ctx, item, errors)
        search_param: 검색어를 보낼 목록 파라미터 이름
        detail_fields: 상세 화면 필드 {키: 제목} (없으면 columns 사용)
        item_label: 항목 표시 이름
        decorate_item: 표시 전에 항목에 계산 필드(라벨 등)를 더하는 함수
        prepare_values: 검증 전에 입력 값을 가공하는 함수 (파일 업로드 등)
        extra_actions: 선택한 항목에 대한 추가 이동 버튼 {라벨: 경로 접미사('/payment/{id}')}
        extra_action_capability: 추가 이동 버튼에 필요한 권한 (Capabilities 속성 이름)
        create_validator: 생성 시에만 적용하는 추가 검증 (필드별 오류 반환)
    """
    title: str
    icon: str
    base_path: str
    resource: str
    schema: Type[BaseModel]
    columns: Dict[str, str]
    render_fields: FieldRenderer
    search_param: Optional[str] = 'name'
    detail_fields: Optional[Dict[str, str]] = None
    item_label: Callable[[dict], str] = field(default=lambda item: str(item.get('name') or item.get('id')))
    decorate_item: Optional[Callable[[dict], dict]] = None
    prepare_values: Optional[Callable[[AppContext, dict], dict]] = None
    extra_actions: Dict[str, str] = field(default_factory=dict)
    extra_action_capability: str = 'can_edit'
    create_validator: Optional[Callable[[dict], dict]] = None

    def api(self, ctx: AppContext) -> ResourceApi:
        return getattr(ctx.api, self.resource)

    def _decorate(self, item: dict) -> dict:
        if self.decorate_item and isinstance(item, dict):
            return self.decorate_item(item)
        return item

    @property
    def form_key(self) -> str:
        return f"form_{self.resource}"

    # 목록

    def render_list(self, ctx: AppContext):
        """목록 화면"""
        st.title(f"{self.icon} {self.title}")
        capabilities = ctx.capabilities()

        col1, col2 = st.columns([4, 1])
        with col1:
            keyword = ''
            if self.search_param:
                keyword = st.text_input("Cari", key=f"search_{self.resource}", placeholder=f"Cari {self.title}...")
        with col2:
            if capabilities.can_add and st.button("➕ Tambah", key=f"add_{self.resource}", use_container_width=True):
                navigate_to(f"{self.base_path}/create")

        params = {self.search_param: keyword} if self.search_param else {}
        with st.spinner("Memuat data..."):
            result = self.api(ctx).list(**params)

        if not result.success:
            ctx.notifier.api_error(result, f"Gagal memuat data {self.title}")
            render_empty(f"Data {self.title} tidak dapat dimuat.")
            return

        items = [self._decorate(item) for item in result.items()]
        if not items:
            render_empty(f"Belum ada data {self.title}.")
            return

        st.dataframe(to_table(items, self.columns), use_container_width=True, hide_index=True)

        self._render_row_actions(ctx, items, capabilities)

    def _render_row_actions(self, ctx: AppContext, items: List[dict], capabilities):
        if not (capabilities.can_edit or capabilities.can_delete or capabilities.can_view):
            return

        labels = {str(item['id']): self.item_label(item) for item in items if 'id' in item}
        if not labels:
            return

        st.markdown("---")
        selected = st.selectbox(
            "Pilih data",
            options=list(labels.keys()),
            format_func=lambda item_id: labels[item_id],
            key=f"select_{self.resource}"
        )

        col1, col2, col3 = st.columns(3)
        with col1:
            if capabilities.can_view and st.button("👁️ Detail", key=f"view_{self.resource}", use_container_width=True):
                navigate_to(f"{self.base_path}/view/{selected}")
        with col2:
            if capabilities.can_edit and st.button("✏️ Edit", key=f"edit_{self.resource}", use_container_width=True):
                navigate_to(f"{self.base_path}/edit/{selected}")
        with col3:
            if capabilities.can_delete and st.button("🗑️ Hapus", key=f"delete_{self.resource}", use_container_width=True):
                st.session_state.pending_delete = (self.resource, selected)

        allowed_extra = self.extra_actions if getattr(capabilities, self.extra_action_capability) else {}
        for label, suffix in allowed_extra.items():
            if st.button(label, key=f"{self.resource}_{suffix}"):
                navigate_to(self.base_path + suffix.format(id=selected))

        if st.session_state.get('pending_delete') == (self.resource, selected):
            self._render_delete_confirmation(ctx, selected, labels[selected])

    def _render_delete_confirmation(self, ctx: AppContext, item_id: str, label: str):
        st.warning(f"Hapus {self.title} '{label}'? Tindakan ini tidak dapat dibatalkan.")
        col1, col2 = st.columns(2)
        with col1:
            if st.button("Ya, hapus", key=f"confirm_delete_{self.resource}", type="primary"):
                st.session_state.pending_delete = None
                result = self.api(ctx).delete(item_id)
                if result.success:
                    logger.info(f"Deleted {self.resource} {item_id}")
                    ctx.notifier.success(f"{self.title} berhasil dihapus")
                else:
                    ctx.notifier.api_error(result, f"Gagal menghapus {self.title}")
                st.rerun()
        with col2:
            if st.button("Batal", key=f"cancel_delete_{self.resource}"):
                st.session_state.pending_delete = None
                st.rerun()

    # 생성 / 수정

    def render_create(self, ctx: AppContext):
        """생성 화면"""
        st.title(f"{self.icon} Tambah {self.title}")
        self._render_form(ctx, {}, item_id=None)

    def render_edit(self, ctx: AppContext, id: str):
        """수정 화면"""
        st.title(f"{self.icon} Edit {self.title}")
        item = self.load_item(ctx, id)
        if item is not None:
            self._render_form(ctx, item, item_id=id)

    def load_item(self, ctx: AppContext, item_id: str) -> Optional[dict]:
        with st.spinner("Memuat data..."):
            result = self.api(ctx).get(item_id)

        if result.is_not_found or (result.success and not result.data):
            render_not_found(f"{self.title} tidak ditemukan", back_path=self.base_path)
            return None
        if not result.success:
            ctx.notifier.api_error(result, f"Gagal memuat {self.title}")
            render_empty(f"Data {self.title} tidak dapat dimuat.")
            return None
        return result.data

    def _render_form(self, ctx: AppContext, item: dict, item_id: Optional[str]):
        errors = st.session_state.form_errors.get(self.form_key, {})
        if FORM_ERROR_KEY in errors:
            st.error(errors[FORM_ERROR_KEY])

        with st.form(self.form_key):
            values = self.render_fields(ctx, item, errors)
            col1, col2 = st.columns([1, 5])
            with col1:
                submitted = st.form_submit_button("💾 Simpan", use_container_width=True)

        if st.button("← Kembali", key=f"back_{self.resource}"):
            navigate_to(self.base_path)

        if submitted:
            self._submit(ctx, values, item_id)

    def submit(self, ctx: AppContext, values: dict, item_id: Optional[str]):
        """
        폼 제출 처리 (Streamlit 없이 호출 가능)

        Returns:
            (성공 여부, 필드별 오류)
        """
        if self.prepare_values:
            values = self.prepare_values(ctx, values)

        form, errors = validate_form(self.schema, values)
        if item_id is None and self.create_validator:
            errors = {**self.create_validator(values), **errors}
        if errors:
            return False, errors

        api = self.api(ctx)
        payload = form.to_payload()
        result = api.create(payload) if item_id is None else api.update(item_id, payload)

        if not result.success:
            ctx.notifier.api_error(result, f"Gagal menyimpan {self.title}")
            return False, {}

        action = "ditambahkan" if item_id is None else "diperbarui"
        logger.info(f"Saved {self.resource} {item_id or '(new)'}")
        ctx.notifier.success(f"{self.title} berhasil {action}")
        return True, {}

    def _submit(self, ctx: AppContext, values: dict, item_id: Optional[str]):
        saved, errors = self.submit(ctx, values, item_id)
        st.session_state.form_errors[self.form_key] = errors
        if saved:
            navigate_to(self.base_path)
        else:
            st.rerun()

    # 상세

    def render_view(self, ctx: AppContext, id: str):
        """상세 화면"""
        st.title(f"{self.icon} Detail {self.title}")
        item = self.load_item(ctx, id)
        if item is None:
            return
        item = self._decorate(item)

        for key, title in (self.detail_fields or self.columns).items():
            value = get_value(item, key)
            st.markdown(f"**{title}**: {value if value not in (None, '') else '-'}")

        api = self.api(ctx)
        if hasattr(api, 'logs'):
            with st.expander("📜 Riwayat perubahan"):
                result = api.logs(id)
                logs = result.items() if result.success else []
                if logs:
                    st.dataframe(pd.DataFrame(logs), use_container_width=True, hide_index=True)
                else:
                    render_empty("Belum ada riwayat.")

        capabilities = ctx.capabilities()
        col1, col2 = st.columns([1, 5])
        with col1:
            if st.button("← Kembali", key=f"back_view_{self.resource}"):
                navigate_to(self.base_path)
        with col2:
            if capabilities.can_edit and st.button("✏️ Edit", key=f"edit_view_{self.resource}"):
                navigate_to(f"{self.base_path}/edit/{id}")
