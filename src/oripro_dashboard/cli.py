"""
Command line entry point

`oripro-dashboard` 명령으로 Streamlit 앱을 실행합니다.
"""

import sys
from pathlib import Path

from streamlit.web import cli as stcli

MAIN_SCRIPT = Path(__file__).parent / 'ui' / 'main.py'


def run():
    """streamlit run <ui/main.py> [추가 인자]"""
    sys.argv = ['streamlit', 'run', str(MAIN_SCRIPT), *sys.argv[1:]]
    sys.exit(stcli.main())
