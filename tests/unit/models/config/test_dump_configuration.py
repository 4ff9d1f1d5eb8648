"""Unit tests for checking ability to dump configuration."""

import json
from pathlib import Path

from models.config import Configuration, UpstreamConfiguration


def test_dump_configuration(tmp_path: Path) -> None:
    """
    Test that the Configuration object can be serialized to a JSON file and
    that the resulting file contains all expected sections and values.
    """
    cfg = Configuration(
        name="test_name",
        upstream=UpstreamConfiguration(api_key="whatever"),
    )
    assert cfg is not None
    dump_file = tmp_path / "test.json"
    cfg.dump(str(dump_file))

    with open(dump_file, "r", encoding="utf-8") as fin:
        content = json.load(fin)

    # content should be loaded
    assert content is not None

    # all sections must exists
    assert "name" in content
    assert "service" in content
    assert "upstream" in content
    assert "history" in content
    assert "inference" in content

    # check the whole deserialized JSON file content
    assert content == {
        "name": "test_name",
        "service": {
            "host": "localhost",
            "port": 3000,
            "workers": 1,
            "color_log": True,
            "access_log": True,
            "environment": "development",
            "cors": {
                "allow_origins": ["*"],
                "allow_credentials": False,
                "allow_methods": ["*"],
                "allow_headers": ["*"],
            },
        },
        "upstream": {
            "completions_url": "https://api.together.xyz/v1/completions",
            "api_key": "**********",
            "require_api_key": True,
            "propagate_error_status": False,
        },
        "history": {
            "type": "memory",
            "default_limit": 50,
            "max_entries": None,
        },
        "inference": {
            "models": [
                "meta-llama/Llama-3.3-70B-Instruct-Turbo",
                "meta-llama/Llama-3.1-70B-Instruct",
                "meta-llama/Llama-3.1-8B-Instruct",
                "mistralai/Mixtral-8x7B-Instruct-v0.1",
                "mistralai/Mistral-7B-Instruct-v0.2",
            ],
            "default_parameters": {
                "model": "meta-llama/Llama-3.3-70B-Instruct-Turbo",
                "max_tokens": 256,
                "temperature": 0.7,
                "top_p": 0.8,
                "top_k": 40,
                "repetition_penalty": 1.0,
                "frequency_penalty": 0.0,
                "stop": None,
            },
        },
    }
