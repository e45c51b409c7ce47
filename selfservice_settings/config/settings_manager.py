"""
SelfService+ Settings Manager
=============================

Named accessors for every catalogue key, built on ConfigurationResolver.
Each accessor is a thin wrapper that passes the key's builtin default.
"""

from typing import Any, Dict, List, Optional
from urllib.parse import urlsplit

from .keys import CATALOGUE, Category, ConfigurationKeys as Keys, keys_in
from .resolver import ConfigurationResolver


def _parse_url(text: Optional[str]) -> Optional[str]:
    """Return ``text`` if it is a usable URL, otherwise None."""
    if text is None:
        return None
    text = text.strip()
    if not text or any(ch.isspace() for ch in text):
        return None
    try:
        parts = urlsplit(text)
    except ValueError:
        return None
    if parts.scheme and not (parts.netloc or parts.path):
        return None
    return parts.geturl()


class SelfServicePlusSettingsManager(ConfigurationResolver):
    """Typed, discoverable access to SelfService+ settings."""

    def _catalogue_value(self, key: str) -> Any:
        spec = CATALOGUE[key]
        return self.get(key, spec.default_value(), spec.value_type)

    # UI Hiding Settings

    def should_hide_connect_menubar(self) -> bool:
        return self._catalogue_value(Keys.HIDE_CONNECT_MENUBAR)

    def should_hide_security_dashboard(self) -> bool:
        return self._catalogue_value(Keys.HIDE_SECURITY_DASHBOARD)

    def should_hide_applications_section(self) -> bool:
        return self._catalogue_value(Keys.HIDE_APPLICATIONS_SECTION)

    def should_hide_patch_management_section(self) -> bool:
        return self._catalogue_value(Keys.HIDE_PATCH_MANAGEMENT_SECTION)

    def should_hide_remote_assistance_section(self) -> bool:
        return self._catalogue_value(Keys.HIDE_REMOTE_ASSISTANCE_SECTION)

    def should_hide_device_compliance_section(self) -> bool:
        return self._catalogue_value(Keys.HIDE_DEVICE_COMPLIANCE_SECTION)

    # Account Management Settings

    def is_single_sign_on_enabled(self) -> bool:
        return self._catalogue_value(Keys.ENABLE_SINGLE_SIGN_ON)

    def get_auto_logout_time_interval(self) -> float:
        """Idle time in seconds before automatic logout."""
        return self._catalogue_value(Keys.AUTO_LOGOUT_TIME_INTERVAL)

    def is_password_required_on_login(self) -> bool:
        return self._catalogue_value(Keys.REQUIRE_PASSWORD_ON_LOGIN)

    def is_user_account_creation_allowed(self) -> bool:
        return self._catalogue_value(Keys.ALLOW_USER_ACCOUNT_CREATION)

    # Branding Settings

    def get_branding_name(self) -> Optional[str]:
        return self._catalogue_value(Keys.BRANDING_NAME)

    def get_branding_logo_url(self) -> Optional[str]:
        """Logo URL, or None when unset or not a valid URL."""
        return _parse_url(self._catalogue_value(Keys.BRANDING_LOGO_URL))

    def get_branding_theme_color(self) -> Optional[str]:
        return self._catalogue_value(Keys.BRANDING_THEME_COLOR)

    # Feature Settings

    def are_advanced_features_enabled(self) -> bool:
        return self._catalogue_value(Keys.ENABLE_ADVANCED_FEATURES)

    def are_beta_features_enabled(self) -> bool:
        return self._catalogue_value(Keys.ENABLE_BETA_FEATURES)

    def get_custom_menu_items(self) -> List[Dict[str, Any]]:
        return self._catalogue_value(Keys.CUSTOM_MENU_ITEMS)

    def get_additional_capabilities(self) -> List[str]:
        return self._catalogue_value(Keys.ADDITIONAL_CAPABILITIES)

    # Analytics and Data Collection Settings

    def is_analytics_disabled(self) -> bool:
        return self._catalogue_value(Keys.DISABLE_ANALYTICS)

    def is_all_data_collection_disabled(self) -> bool:
        return self._catalogue_value(Keys.DISABLE_ALL_DATA_COLLECTION)

    def is_sentry_logging_disabled(self) -> bool:
        return self._catalogue_value(Keys.DISABLE_SENTRY_LOGGING)

    # Bulk access

    def get_all_ui_hiding_settings(self) -> Dict[str, bool]:
        """All six UI hiding flags keyed by configuration key."""
        return {key: self._catalogue_value(key) for key in keys_in(Category.UI_HIDING)}

    def get_all_branding_settings(self) -> Dict[str, Optional[str]]:
        """Branding name, logo URL (as a string) and theme color."""
        return {
            Keys.BRANDING_NAME: self.get_branding_name(),
            Keys.BRANDING_LOGO_URL: self.get_branding_logo_url(),
            Keys.BRANDING_THEME_COLOR: self.get_branding_theme_color(),
        }


# Legacy name
SettingsManager = SelfServicePlusSettingsManager
