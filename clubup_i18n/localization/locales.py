"""
Built-in display locale catalog.
"""

from typing import Dict, List

from ..models import LocaleConfig

DEFAULT_LOCALE_CODE = 'en-GB'

BUILTIN_LOCALES: Dict[str, LocaleConfig] = {
    'en-GB': LocaleConfig(
        code='en-GB', name='English (UK)', native_name='English (UK)', flag='🇬🇧', direction='ltr'
    ),
    'en-US': LocaleConfig(
        code='en-US', name='English (US)', native_name='English (US)', flag='🇺🇸', direction='ltr'
    ),
    'en-AU': LocaleConfig(
        code='en-AU', name='English (AU)', native_name='English (Australia)', flag='🇦🇺', direction='ltr'
    ),
    'en-CA': LocaleConfig(
        code='en-CA', name='English (CA)', native_name='English (Canada)', flag='🇨🇦', direction='ltr'
    ),
    'fr-FR': LocaleConfig(
        code='fr-FR', name='French', native_name='Français', flag='🇫🇷', direction='ltr'
    ),
    'de-DE': LocaleConfig(
        code='de-DE', name='German', native_name='Deutsch', flag='🇩🇪', direction='ltr'
    ),
    'es-ES': LocaleConfig(
        code='es-ES', name='Spanish', native_name='Español', flag='🇪🇸', direction='ltr'
    ),
    'it-IT': LocaleConfig(
        code='it-IT', name='Italian', native_name='Italiano', flag='🇮🇹', direction='ltr'
    ),
}

# Offered in the language picker; the regional English variants follow the country
SELECTABLE_LOCALES: List[str] = ['en-GB', 'en-US', 'fr-FR', 'de-DE', 'es-ES', 'it-IT']
