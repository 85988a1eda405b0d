"""
설정 관리 모듈.

pydantic-settings를 사용하여 .env 파일과 환경변수에서 설정을 로드한다.
환경변수는 TYPEJUICE_ 접두사를 붙여 매칭된다.

사용 예:
    settings = Settings()
    print(settings.type_root)
"""

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    typejuice 전역 설정.

    .env 파일 또는 환경변수에서 값을 읽어온다.
    예: type_root → TYPEJUICE_TYPE_ROOT
    """

    # 포함 지시자(<<< typejuice:경로)의 상대 경로 기준 디렉토리
    type_root: Path = Path(".")

    # 주석 문단 줄바꿈 폭
    wrap_width: int = 80

    # 스크립트 실행 시 로그 레벨
    log_level: str = "WARNING"

    # pydantic-settings 설정: 환경변수 접두사, .env 파일 경로와 인코딩
    model_config = {
        "env_prefix": "TYPEJUICE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }
