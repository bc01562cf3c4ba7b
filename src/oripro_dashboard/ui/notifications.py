"""
토스트 알림

한 번에 하나의 토스트만 표시합니다. 새 알림은 대기 중인 알림을 대체하며,
rerun 한 번에 한 번만 st.toast로 출력됩니다.
"""

from dataclasses import dataclass
from typing import Any, MutableMapping, Optional

import streamlit as st

from oripro_dashboard.api import ApiResult
from oripro_dashboard.log.logger import setup_logger

logger = setup_logger('Notifier')

PENDING_TOAST_KEY = 'pending_toast'

_TOAST_ICONS = {
    'success': '✅',
    'error': '❌',
    'info': 'ℹ️',
}


@dataclass(frozen=True)
class Toast:
    kind: str
    message: str

    @property
    def icon(self) -> str:
        return _TOAST_ICONS.get(self.kind, _TOAST_ICONS['info'])


class Notifier:
    """단일 토스트 알림"""

    def __init__(self, store: MutableMapping[str, Any]):
        """
        Args:
            store: 대기 중인 토스트를 보관할 저장소 (st.session_state 또는 dict)
        """
        self.store = store

    @property
    def pending(self) -> Optional[Toast]:
        return self.store.get(PENDING_TOAST_KEY)

    def _push(self, kind: str, message: str):
        self.store[PENDING_TOAST_KEY] = Toast(kind, message)

    def success(self, message: str):
        self._push('success', message)

    def error(self, message: str):
        self._push('error', message)

    def info(self, message: str):
        self._push('info', message)

    def api_error(self, result: ApiResult, fallback: str = "Terjadi kesalahan"):
        """
        API 오류 알림

        401은 세션이 이미 무효화되어 로그인 화면으로 이동하므로 알리지 않습니다.
        """
        if result.is_unauthorized:
            return
        logger.warning(f"API error ({result.kind}): {result.error}")
        self.error(result.error or fallback)

    def flush(self) -> Optional[Toast]:
        """대기 중인 토스트를 출력하고 비움"""
        toast = self.store.pop(PENDING_TOAST_KEY, None)
        if toast is not None:
            st.toast(toast.message, icon=toast.icon)
        return toast
