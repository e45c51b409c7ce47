"""
Configuration Keys
==================

Stable, case-sensitive key identifiers and their builtin defaults.

Keys are grouped by category for documentation only; the resolver treats
every key the same way.
"""

from copy import deepcopy
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List

from .errors import KeyNotFoundError
from .value_types import ValueType


class ConfigurationKeys:
    """Key identifiers understood by SelfService+."""

    # UI Hiding Keys
    HIDE_CONNECT_MENUBAR = "HideConnectMenubar"
    HIDE_SECURITY_DASHBOARD = "HideSecurityDashboard"
    HIDE_APPLICATIONS_SECTION = "HideApplicationsSection"
    HIDE_PATCH_MANAGEMENT_SECTION = "HidePatchManagementSection"
    HIDE_REMOTE_ASSISTANCE_SECTION = "HideRemoteAssistanceSection"
    HIDE_DEVICE_COMPLIANCE_SECTION = "HideDeviceComplianceSection"

    # Account Management Keys
    ENABLE_SINGLE_SIGN_ON = "EnableSingleSignOn"
    AUTO_LOGOUT_TIME_INTERVAL = "AutoLogoutTimeInterval"
    REQUIRE_PASSWORD_ON_LOGIN = "RequirePasswordOnLogin"
    ALLOW_USER_ACCOUNT_CREATION = "AllowUserAccountCreation"

    # Branding Keys
    BRANDING_NAME = "BrandingName"
    BRANDING_LOGO_URL = "BrandingLogoURL"
    BRANDING_THEME_COLOR = "BrandingThemeColor"

    # Feature Keys
    ENABLE_ADVANCED_FEATURES = "EnableAdvancedFeatures"
    ENABLE_BETA_FEATURES = "EnableBetaFeatures"
    CUSTOM_MENU_ITEMS = "CustomMenuItems"
    ADDITIONAL_CAPABILITIES = "AdditionalCapabilities"

    # Analytics and Data Collection
    DISABLE_ANALYTICS = "DisableAnalytics"
    DISABLE_ALL_DATA_COLLECTION = "DisableAllDataCollection"
    DISABLE_SENTRY_LOGGING = "DisableSentryLogging"


class Category(Enum):
    """Documentation grouping of keys."""
    UI_HIDING = "ui_hiding"
    ACCOUNT = "account"
    BRANDING = "branding"
    FEATURES = "features"
    ANALYTICS = "analytics"


@dataclass(frozen=True)
class KeySpec:
    """Catalogue entry for a single key."""
    key: str
    value_type: ValueType
    default: Any
    category: Category
    description: str = ""

    def default_value(self) -> Any:
        """Builtin default, copied so callers can't mutate the catalogue."""
        return deepcopy(self.default)


_K = ConfigurationKeys

_SPECS: List[KeySpec] = [
    KeySpec(_K.HIDE_CONNECT_MENUBAR, ValueType.BOOL, False, Category.UI_HIDING,
            "Hide the Connect menu bar item"),
    KeySpec(_K.HIDE_SECURITY_DASHBOARD, ValueType.BOOL, False, Category.UI_HIDING,
            "Hide the security dashboard"),
    KeySpec(_K.HIDE_APPLICATIONS_SECTION, ValueType.BOOL, False, Category.UI_HIDING,
            "Hide the applications section"),
    KeySpec(_K.HIDE_PATCH_MANAGEMENT_SECTION, ValueType.BOOL, False, Category.UI_HIDING,
            "Hide the patch management section"),
    KeySpec(_K.HIDE_REMOTE_ASSISTANCE_SECTION, ValueType.BOOL, False, Category.UI_HIDING,
            "Hide the remote assistance section"),
    KeySpec(_K.HIDE_DEVICE_COMPLIANCE_SECTION, ValueType.BOOL, False, Category.UI_HIDING,
            "Hide the device compliance section"),
    KeySpec(_K.ENABLE_SINGLE_SIGN_ON, ValueType.BOOL, False, Category.ACCOUNT,
            "Enable single sign-on"),
    KeySpec(_K.AUTO_LOGOUT_TIME_INTERVAL, ValueType.NUMBER, 3600.0, Category.ACCOUNT,
            "Idle time in seconds before automatic logout"),
    KeySpec(_K.REQUIRE_PASSWORD_ON_LOGIN, ValueType.BOOL, True, Category.ACCOUNT,
            "Require a password on login"),
    KeySpec(_K.ALLOW_USER_ACCOUNT_CREATION, ValueType.BOOL, True, Category.ACCOUNT,
            "Allow users to create accounts"),
    KeySpec(_K.BRANDING_NAME, ValueType.OPTIONAL_STRING, None, Category.BRANDING,
            "Organisation display name"),
    KeySpec(_K.BRANDING_LOGO_URL, ValueType.OPTIONAL_STRING, None, Category.BRANDING,
            "Logo URL"),
    KeySpec(_K.BRANDING_THEME_COLOR, ValueType.OPTIONAL_STRING, None, Category.BRANDING,
            "Theme color"),
    KeySpec(_K.ENABLE_ADVANCED_FEATURES, ValueType.BOOL, False, Category.FEATURES,
            "Enable advanced features"),
    KeySpec(_K.ENABLE_BETA_FEATURES, ValueType.BOOL, False, Category.FEATURES,
            "Enable beta features"),
    KeySpec(_K.CUSTOM_MENU_ITEMS, ValueType.RECORD_LIST, [], Category.FEATURES,
            "Additional menu entries"),
    KeySpec(_K.ADDITIONAL_CAPABILITIES, ValueType.STRING_LIST, [], Category.FEATURES,
            "Extra capability identifiers"),
    KeySpec(_K.DISABLE_ANALYTICS, ValueType.BOOL, False, Category.ANALYTICS,
            "Disable analytics"),
    KeySpec(_K.DISABLE_ALL_DATA_COLLECTION, ValueType.BOOL, False, Category.ANALYTICS,
            "Disable all data collection"),
    KeySpec(_K.DISABLE_SENTRY_LOGGING, ValueType.BOOL, False, Category.ANALYTICS,
            "Disable Sentry crash logging"),
]

CATALOGUE: Dict[str, KeySpec] = {spec.key: spec for spec in _SPECS}


def spec_for(key: str) -> KeySpec:
    """
    Look up the catalogue entry for a key.

    Raises:
        KeyNotFoundError: If the key is not in the catalogue
    """
    try:
        return CATALOGUE[key]
    except KeyError:
        raise KeyNotFoundError(key) from None


def keys_in(category: Category) -> List[str]:
    """Catalogue keys belonging to a category, in declaration order."""
    return [spec.key for spec in _SPECS if spec.category is category]
