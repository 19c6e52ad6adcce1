from src.infrastructure.config.settings import Settings


def test_defaults_when_environment_is_empty():
    settings = Settings.from_env({})

    assert settings.google_api_key is None
    assert settings.gemini_model == "gemini-2.5-flash"
    assert settings.gemini_temperature == 0.2
    assert settings.aws_region == "us-east-1"
    assert settings.log_level == "INFO"
    assert settings.log_json is False
    assert settings.langfuse_enabled is False


def test_environment_overrides():
    settings = Settings.from_env(
        {
            "GOOGLE_API_KEY": "k",
            "GEMINI_MODEL": "gemini-2.5-pro",
            "GEMINI_TEMPERATURE": "0.5",
            "GOOGLE_API_KEY_SECRET_ARN": "arn:aws:secretsmanager:eu-west-1:1:secret:x",
            "AWS_DEFAULT_REGION": "eu-west-1",
            "LANGFUSE_PUBLIC_KEY": "pk",
            "LOG_LEVEL": "debug",
            "LOG_JSON": "true",
        }
    )

    assert settings.google_api_key == "k"
    assert settings.gemini_model == "gemini-2.5-pro"
    assert settings.gemini_temperature == 0.5
    assert settings.google_api_key_secret_arn.endswith(":x")
    assert settings.aws_region == "eu-west-1"
    assert settings.langfuse_enabled is True
    assert settings.log_level == "debug"
    assert settings.log_json is True


def test_blank_values_count_as_unset():
    settings = Settings.from_env({"GOOGLE_API_KEY": "", "LANGFUSE_PUBLIC_KEY": ""})

    assert settings.google_api_key is None
    assert settings.langfuse_enabled is False
