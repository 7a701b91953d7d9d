from parley.editor_settings import AssetLocation, EditorSettings, output_dir

SHARED = "/Game/Shared"
PACKAGE = "/Game/Scripts"


def test_output_dir_plain_locations():
    assert output_dir(AssetLocation.SHARED_DIRECTORY, SHARED, PACKAGE, "Intro") == SHARED
    assert output_dir(AssetLocation.SCRIPT_DIRECTORY, SHARED, PACKAGE, "Intro") == PACKAGE


def test_output_dir_subdirs():
    assert output_dir(AssetLocation.SHARED_DIRECTORY_SUBDIR, SHARED, PACKAGE, "Intro") == "/Game/Shared/Intro"
    assert output_dir(AssetLocation.SCRIPT_DIRECTORY_SUBDIR, SHARED + "/", PACKAGE + "/", "Intro") == "/Game/Scripts/Intro"


def test_subdir_starts_with_base():
    result = output_dir(AssetLocation.SHARED_DIRECTORY_SUBDIR, SHARED, PACKAGE, "Town")
    assert result.startswith(SHARED + "/")
    assert result.endswith("Town")


def test_should_generate_always():
    settings = EditorSettings(always_auto_generate_voice_assets=True)
    assert settings.should_generate_voice_assets("/Anywhere")


def test_should_generate_by_directory():
    settings = EditorSettings(auto_generate_voice_asset_dirs=["/Game/Dialogue"])
    assert settings.should_generate_voice_assets("/Game/Dialogue/Town")
    assert settings.should_generate_voice_assets("/Game/Dialogue")
    assert not settings.should_generate_voice_assets("/Game/Dialogue2")
    assert not settings.should_generate_voice_assets("/Game/Other")


def test_voice_and_wave_dirs_use_own_settings():
    settings = EditorSettings(
        voice_asset_location=AssetLocation.SHARED_DIRECTORY,
        voice_asset_shared_dir=SHARED,
        wave_asset_location=AssetLocation.SCRIPT_DIRECTORY,
        wave_asset_shared_dir="/Game/Waves",
    )
    assert settings.voice_output_dir(PACKAGE, "Intro") == SHARED
    assert settings.wave_output_dir(PACKAGE, "Intro") == PACKAGE