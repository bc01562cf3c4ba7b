"""
메인 애플리케이션 흐름 테스트
"""

from unittest.mock import patch

from oripro_dashboard.config import Config
from oripro_dashboard.ui import main


@patch('oripro_dashboard.ui.main.render_public_page')
@patch('oripro_dashboard.ui.main.get_current_page', return_value='/auth/reset-password')
@patch('oripro_dashboard.ui.main.get_app_context')
@patch('oripro_dashboard.ui.main.initialize_session_state')
@patch('oripro_dashboard.ui.main.configure_logging')
@patch('oripro_dashboard.ui.main.st')
def test_main_applies_logging_config(mock_st, mock_configure, mock_init, mock_get_ctx, mock_page, mock_public):
    """설정의 로그 파일/레벨을 로깅에 적용하고 비로그인 화면 렌더링"""
    ctx = mock_get_ctx.return_value
    ctx.config = Config(log_file='oripro.log', log_level='DEBUG')
    ctx.session.is_authenticated = False

    main.main()

    mock_configure.assert_called_once_with('oripro.log', 'DEBUG')
    mock_public.assert_called_once_with(ctx, '/auth/reset-password')
    ctx.session.remember_redirect.assert_not_called()
    ctx.menu_store.ensure_loaded.assert_not_called()
