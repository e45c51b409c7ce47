"""
Settings Manager Tests
======================

Named accessors, builtin defaults and bulk accessors.
"""

import pytest

from selfservice_settings.config import (
    CATALOGUE,
    Category,
    ConfigurationKeys,
    KeyNotFoundError,
    ManagedStore,
    SelfServicePlusSettingsManager,
    SettingsManager,
    keys_in,
    spec_for,
)


@pytest.fixture
def managed():
    return ManagedStore()


@pytest.fixture
def manager(settings, managed):
    return SelfServicePlusSettingsManager(settings, managed_store=managed)


def test_builtin_defaults(manager):
    assert manager.should_hide_connect_menubar() is False
    assert manager.should_hide_security_dashboard() is False
    assert manager.should_hide_applications_section() is False
    assert manager.should_hide_patch_management_section() is False
    assert manager.should_hide_remote_assistance_section() is False
    assert manager.should_hide_device_compliance_section() is False

    assert manager.is_single_sign_on_enabled() is False
    assert manager.get_auto_logout_time_interval() == 3600.0
    assert manager.is_password_required_on_login() is True
    assert manager.is_user_account_creation_allowed() is True

    assert manager.get_branding_name() is None
    assert manager.get_branding_logo_url() is None
    assert manager.get_branding_theme_color() is None

    assert manager.are_advanced_features_enabled() is False
    assert manager.are_beta_features_enabled() is False
    assert manager.get_custom_menu_items() == []
    assert manager.get_additional_capabilities() == []

    assert manager.is_analytics_disabled() is False
    assert manager.is_all_data_collection_disabled() is False
    assert manager.is_sentry_logging_disabled() is False


def test_document_only_scenario(manager, write_document):
    write_document({"BrandingName": "Acme", "EnableAdvancedFeatures": True})
    manager.reload()

    assert manager.get_branding_name() == "Acme"
    assert manager.are_advanced_features_enabled() is True
    assert manager.should_hide_connect_menubar() is False


def test_shared_interval_beats_document(settings, app_group, managed, write_document):
    app_group.write({"AutoLogoutTimeInterval": 1800})
    write_document({"AutoLogoutTimeInterval": 900})
    manager = SelfServicePlusSettingsManager(settings, managed_store=managed)

    assert manager.get_auto_logout_time_interval() == 1800.0


def test_managed_values(manager, managed):
    managed.update({
        "HideConnectMenubar": True,
        "DisableAnalytics": True,
        "AdditionalCapabilities": ["printing", "vpn"],
        "CustomMenuItems": [{"title": "Help Desk", "url": "https://help.example.com"}],
    })

    assert manager.should_hide_connect_menubar() is True
    assert manager.is_analytics_disabled() is True
    assert manager.get_additional_capabilities() == ["printing", "vpn"]
    assert manager.get_custom_menu_items()[0]["title"] == "Help Desk"


def test_returned_lists_are_copies(manager, managed):
    manager.get_additional_capabilities().append("mutated")
    assert manager.get_additional_capabilities() == []

    managed.update({"CustomMenuItems": [{"title": "Help"}]})
    manager.get_custom_menu_items()[0]["title"] = "mutated"
    assert manager.get_custom_menu_items() == [{"title": "Help"}]


@pytest.mark.parametrize("raw, expected", [
    ("https://cdn.example.com/logo.png", "https://cdn.example.com/logo.png"),
    ("  https://cdn.example.com/logo.png ", "https://cdn.example.com/logo.png"),
    ("logo.png", "logo.png"),
    ("not a url", None),
    ("", None),
    ("https://", None),
    ("http://[::1", None),
])
def test_branding_logo_url(manager, managed, raw, expected):
    managed.update({"BrandingLogoURL": raw})
    assert manager.get_branding_logo_url() == expected


def test_all_ui_hiding_settings(manager, managed):
    managed.update({"HideSecurityDashboard": True})
    ui = manager.get_all_ui_hiding_settings()

    assert len(ui) == 6
    assert ui[ConfigurationKeys.HIDE_SECURITY_DASHBOARD] is True
    assert ui[ConfigurationKeys.HIDE_CONNECT_MENUBAR] is False
    assert set(ui) == set(keys_in(Category.UI_HIDING))


def test_all_branding_settings(manager, managed):
    managed.update({
        "BrandingName": "Acme",
        "BrandingLogoURL": "https://cdn.example.com/logo.png",
    })

    assert manager.get_all_branding_settings() == {
        "BrandingName": "Acme",
        "BrandingLogoURL": "https://cdn.example.com/logo.png",
        "BrandingThemeColor": None,
    }


def test_legacy_alias():
    assert SettingsManager is SelfServicePlusSettingsManager


class TestCatalogue:

    def test_catalogue_covers_every_key(self):
        keys = [value for name, value in vars(ConfigurationKeys).items() if name.isupper()]
        assert len(keys) == 20
        assert sorted(keys) == sorted(CATALOGUE)

    def test_categories(self):
        assert len(keys_in(Category.UI_HIDING)) == 6
        assert len(keys_in(Category.ACCOUNT)) == 4
        assert len(keys_in(Category.BRANDING)) == 3
        assert len(keys_in(Category.FEATURES)) == 4
        assert len(keys_in(Category.ANALYTICS)) == 3

    def test_spec_for_unknown_key(self):
        assert spec_for("AutoLogoutTimeInterval").default == 3600.0
        with pytest.raises(KeyNotFoundError) as excinfo:
            spec_for("NonExistentKey")
        assert str(excinfo.value) == "Configuration key not found: NonExistentKey"
