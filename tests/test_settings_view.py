from views.pages.settings_view import NO_LOGO, logo_patch_value


def test_remove_logo_sends_empty_url():
    assert logo_patch_value("https://example.com/logo.png", remove=True) == NO_LOGO == ""


def test_blank_logo_field_keeps_current_logo():
    assert logo_patch_value("   ", remove=False) is None
    assert logo_patch_value(" https://example.com/l.png ", remove=False) == "https://example.com/l.png"
