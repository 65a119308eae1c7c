from fakedata.config import load_config


def test_default_values() -> None:
    cfg = load_config(env={})
    assert cfg.schema_version == 1
    assert cfg.locale == "en_US"
    assert cfg.validation.pattern == r"^[A-Za-z0-9]{12}$"
    assert cfg.generation.formats == "pdf:1,xlsx:1,docx:1,pptx:1"
    assert cfg.generation.output_dir == "./output"
    assert cfg.generation.theme is None
    assert cfg.content.seeded is False
    assert cfg.content.seed is None
    assert cfg.content.seed_env == "FAKEDATA_SEED"
    assert cfg.manifest.filename_template == "manifest%d%m%y%H.csv"
    assert cfg.manifest.shared_ids is False
    assert cfg.manifest.leading_blank_line is False
