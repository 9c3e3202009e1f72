"""Quickstart example for ordbok.

Writes two small dictionaries to a temporary directory and walks through
lookups, nested keys, pluralization, language switching and missing keys.

Note: the missing-key example emits a MissingKeyWarning and a log record;
in production, route the "ordbok" logger to wherever translators look.
"""

import json
import tempfile
import warnings
from pathlib import Path

from ordbok import AtomicKey, LanguageUnavailableError, Localizer

ENGLISH = {
    "greeting": "Hello World!",
    "welcome": "Welcome, %{name}!",
    "balance": "Balance: %<amount>.2f",
    "inbox": {
        "unread": {
            "zero": "You have no new messages.",
            "one": "You have %{count} new message.",
            "other": "You have %{count} new messages.",
        },
    },
    "version.label": "Version",
}

SWEDISH = {
    "greeting": "Hej världen!",
    "welcome": "Välkommen, %{name}!",
    "balance": "Saldo: %<amount>.2f",
    "inbox": {
        "unread": {
            "zero": "Du har inga nya meddelanden.",
            "one": "Du har %{count} nytt meddelande.",
            "other": "Du har %{count} nya meddelanden.",
        },
    },
}

with tempfile.TemporaryDirectory() as tmp:
    resources = Path(tmp)
    for code, entries in {"en-US": ENGLISH, "sv-SE": SWEDISH}.items():
        (resources / f"{code}.lang").write_text(
            json.dumps(entries, ensure_ascii=False), encoding="utf-8"
        )

    # Example 1: Construction and simple lookup
    print("=" * 50)
    print("Example 1: Simple Lookup")
    print("=" * 50)

    l10n = Localizer(resources, "en-US")
    print(l10n.language)
    # Output: en-US
    print(l10n["greeting"])
    # Output: Hello World!

    # Example 2: Interpolation
    print("\n" + "=" * 50)
    print("Example 2: Interpolation")
    print("=" * 50)

    print(l10n.lookup("welcome", name="Alice"))
    # Output: Welcome, Alice!
    print(l10n.lookup("balance", amount=12.5))
    # Output: Balance: 12.50

    # Example 3: Nested keys and pluralization
    print("\n" + "=" * 50)
    print("Example 3: Pluralization")
    print("=" * 50)

    for count in (0, 1, 7):
        print(l10n.lookup("inbox.unread", count=count))
    # Output:
    # You have no new messages.
    # You have 1 new message.
    # You have 7 new messages.

    print(l10n[AtomicKey("version.label")])
    # Output: Version

    # Example 4: Switching language
    print("\n" + "=" * 50)
    print("Example 4: Switching Language")
    print("=" * 50)

    print(l10n.language_names("en-US"))
    # Output: {'en-US': 'English (United States)', 'sv-SE': 'Swedish (Sweden)'}

    l10n.set_language("sv-SE")
    print(l10n.lookup("inbox.unread", count=3))
    # Output: Du har 3 nya meddelanden.

    try:
        l10n.set_language("fr-FR")
    except LanguageUnavailableError as e:
        print(f"Still {l10n.language}: {e.diagnostic.message if e.diagnostic else e}")
    # Output: Still sv-SE: Language 'fr-FR' is unavailable

    # Example 5: Missing keys degrade to the key itself
    print("\n" + "=" * 50)
    print("Example 5: Missing Keys")
    print("=" * 50)

    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        print(l10n["version.label"])
    # Output: version.label
