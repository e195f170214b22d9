import json

import pytest


@pytest.fixture
def write_translations(tmp_path):
    def write(languages, folder=None):
        folder = folder or tmp_path / "translations"
        folder.mkdir(parents=True, exist_ok=True)
        for langid, translation in languages.items():
            (folder / f"{langid}.json").write_text(
                json.dumps(translation, ensure_ascii=False), "utf-8"
            )
        return folder

    return write
