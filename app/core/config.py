from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정"""

    environment: str = "development"

    # 나레이션 LLM 프로바이더: "openai", "vllm", "gemini"
    llm_provider: str = "openai"

    # OpenAI 설정
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    openai_timeout: float = 60.0

    # vLLM/RunPod 설정
    vllm_api_url: str = ""
    vllm_api_key: str = ""
    vllm_model: str = ""
    vllm_timeout: float = 120.0

    # Gemini 설정
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    gemini_timeout: float = 60.0

    # 나레이션 설정
    narration_temperature: float = 0.2
    narration_max_tokens: int = 500
    narration_timeout: float = 90.0
    narration_diff_max_chars: int = 4000

    # GitHub
    github_token: str = ""
    github_timeout: float = 30.0

    # 영상 기본값
    video_fps: int = 30
    video_total_frames: int = 450
    video_width: int = 1920
    video_height: int = 1080

    # 요청 제한
    analysis_rate_limit: str = "30/minute"

    # 로깅 설정
    log_level: str = "INFO"
    log_json: bool = False

    # Langfuse 설정
    langfuse_public_key: str = ""
    langfuse_secret_key: str = ""
    langfuse_base_url: str = "https://cloud.langfuse.com"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def validate_for_production(self) -> list[str]:
        """선택된 LLM 프로바이더의 필수 설정 누락 항목 반환"""
        errors = []
        provider = self.llm_provider.lower()
        if provider == "openai" and not self.openai_api_key:
            errors.append("OPENAI_API_KEY")
        if provider == "vllm" and not self.vllm_api_url:
            errors.append("VLLM_API_URL")
        if provider == "gemini" and not self.gemini_api_key:
            errors.append("GEMINI_API_KEY")
        if not self.github_token:
            errors.append("GITHUB_TOKEN")
        return errors

    @model_validator(mode="after")
    def validate_video_settings(self):
        """영상 기본값 검증"""
        if self.video_fps <= 0:
            raise ValueError("VIDEO_FPS는 양수여야 합니다")
        if self.video_total_frames <= 0:
            raise ValueError("VIDEO_TOTAL_FRAMES는 양수여야 합니다")
        return self


settings = Settings()
