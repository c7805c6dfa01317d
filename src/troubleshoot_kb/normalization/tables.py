"""
Static normalization tables.

Rules are ordered tuples: lexical rules are applied one after another to
the same string, so a later rule sees the output of every earlier one.
"""
import json
from dataclasses import dataclass
from typing import Any, Tuple

from ..exceptions import ConfigurationError

NormalizationRule = Tuple[str, str]
ContextExpansion = Tuple[str, Tuple[str, ...]]

DEFAULT_NORMALIZATION_RULES: Tuple[NormalizationRule, ...] = (
    # Common abbreviations
    ("wt", "what"), ("wts", "what is"), ("wtw", "what the"),
    ("pls", "please"), ("plz", "please"), ("thx", "thanks"),
    ("tnx", "thanks"), ("ty", "thank you"), ("np", "no problem"),

    # Tech abbreviations
    ("err", "error"), ("errs", "errors"), ("prob", "problem"),
    ("probs", "problems"), ("comp", "computer"), ("pcs", "computers"),
    ("cpu", "processor"), ("gpu", "graphics"), ("ram", "memory"),
    ("hdd", "hard drive"), ("ssd", "solid state drive"), ("bios", "basic input output system"),
    ("os", "operating system"), ("win", "windows"), ("mac", "macos"),
    ("linux", "linux"), ("app", "application"), ("apps", "applications"),

    # Network & Internet
    ("wifi", "wi-fi"), ("net", "network"), ("inet", "internet"),
    ("conn", "connection"), ("disconn", "disconnection"), ("bandwidth", "band width"),
    ("ip", "internet protocol"), ("dns", "domain name system"), ("vpn", "virtual private network"),
    ("lan", "local area network"), ("wan", "wide area network"),

    # Typos and slang
    ("noot", "not"), ("nooot", "not"), ("cant", "cannot"),
    ("wont", "will not"), ("doesnt", "does not"), ("dont", "do not"),
    ("arent", "are not"), ("isnt", "is not"), ("wasnt", "was not"),
    ("werent", "were not"), ("havent", "have not"), ("hasnt", "has not"),
    ("hadnt", "had not"), ("wouldnt", "would not"), ("couldnt", "could not"),
    ("shouldnt", "should not"), ("mightnt", "might not"), ("mustnt", "must not"),

    # Misspellings
    ("reciev", "receive"), ("recieving", "receiving"), ("recieved", "received"),
    ("recieve", "receive"), ("seperate", "separate"), ("definately", "definitely"),
    ("occured", "occurred"), ("ooning", "opening"), ("cliking", "clicking"),
    ("clik", "click"), ("dubble", "double"), ("trubble", "trouble"),
    ("trubl", "trouble"), ("issu", "issue"), ("isue", "issue"),

    # Short forms and contractions
    ("u", "you"), ("ur", "your"), ("urs", "yours"),
    ("im", "i am"), ("ive", "i have"), ("ill", "i will"),
    ("id", "i would"), ("youre", "you are"), ("youve", "you have"),
    ("youll", "you will"), ("youd", "you would"), ("hes", "he is"),
    ("shes", "she is"), ("its", "it is"), ("were", "we are"),
    ("weve", "we have"), ("well", "we will"), ("wed", "we would"),
    ("theyre", "they are"), ("theyve", "they have"), ("theyll", "they will"),
    ("theyd", "they would"), ("thats", "that is"), ("wheres", "where is"),
    ("whens", "when is"), ("hows", "how is"), ("whys", "why is"),
    ("heres", "here is"), ("theres", "there is"), ("whos", "who is"),

    # Informal problem phrasing
    ("no work", "not working"), ("not work", "not working"),
    ("no connect", "not connecting"), ("not connect", "not connecting"),
    ("no open", "not opening"), ("not open", "not opening"),
    ("no start", "not starting"), ("not start", "not starting"),
    ("no load", "not loading"), ("not load", "not loading"),
    ("no respond", "not responding"), ("not respond", "not responding"),
    ("no display", "not displaying"), ("not display", "not displaying"),
)

# Triggers are matched against lexically normalized text, where "wifi" has
# already become "wi fi".
DEFAULT_CONTEXT_EXPANSIONS: Tuple[ContextExpansion, ...] = (
    ("404", ("http error", "website", "page not found", "broken link", "missing page")),
    ("500", ("server error", "internal error", "website down", "application crash")),
    ("wi fi", ("wireless", "network", "internet", "connection")),
    ("wifi", ("wireless", "network", "internet", "connection", "wi-fi")),
    ("internet", ("browser", "website", "online", "network", "connection")),
    ("computer", ("pc", "laptop", "desktop", "device", "machine")),
    ("slow", ("lag", "lagging", "performance", "speed", "freeze")),
    ("crash", ("close", "stop", "freeze", "not responding", "error")),
    ("blue screen", ("bsod", "windows error", "system crash", "stop code")),
    ("outlook", ("email", "microsoft", "office", "client", "mail")),
    ("printer", ("print", "printing", "paper", "ink", "document")),
    ("sound", ("audio", "speaker", "volume", "hear", "mute")),
    ("camera", ("webcam", "video", "zoom", "teams", "meeting")),
)

# Literal substring of the processed query -> canonical KB title.
DEFAULT_PHRASE_MAP: Tuple[Tuple[str, str], ...] = (
    ("computer running slow", "Computer is Running Slow"),
    ("computer slow", "Computer is Running Slow"),
    ("pc slow", "Computer is Running Slow"),
    ("laptop slow", "Computer is Running Slow"),
    ("wifi not working", "Cannot Connect to Wi-Fi"),
    ("wi fi not working", "Cannot Connect to Wi-Fi"),
    ("wifi connection", "Cannot Connect to Wi-Fi"),
    ("wi fi connection", "Cannot Connect to Wi-Fi"),
    ("internet not working", "Cannot Connect to Wi-Fi"),
    ("printer issues", "My Default Printer Keeps Changing"),
    ("printer not working", "My Default Printer Keeps Changing"),
    ("outlook not opening", "Outlook is Not Opening"),
    ("email not working", "Cannot Send or Receive Emails"),
    ("blue screen", "Blue Screen of Death (BSOD)"),
    ("bsod", "Blue Screen of Death (BSOD)"),
    ("error 404", "404 Not Found"),
    ("404 error", "404 Not Found"),
    ("page not found", "404 Not Found"),
    ("error 500", "500 Internal Server Error"),
    ("server error", "500 Internal Server Error"),
)


@dataclass(frozen=True)
class NormalizationTables:
    """
    Configuration data for the query pipeline and the phrase matcher.

    Patterns in ``normalization_rules`` are plain words or phrases; the
    normalizer wraps them in word boundaries and matches case-insensitively.
    """
    normalization_rules: Tuple[NormalizationRule, ...] = DEFAULT_NORMALIZATION_RULES
    context_expansions: Tuple[ContextExpansion, ...] = DEFAULT_CONTEXT_EXPANSIONS
    phrase_map: Tuple[Tuple[str, str], ...] = DEFAULT_PHRASE_MAP

    @classmethod
    def from_dict(cls, data: Any) -> "NormalizationTables":
        """
        Build tables from a JSON-style dict.

        Each key is optional; a missing key keeps the default table. Values
        are lists of pairs so declaration order survives serialization:
        ``{"normalization_rules": [["pls", "please"]],
        "context_expansions": [["printer", ["print", "ink"]]],
        "phrase_map": [["bsod", "Blue Screen of Death (BSOD)"]]}``

        :raises: ConfigurationError if a table has the wrong shape
        """
        if not isinstance(data, dict):
            raise ConfigurationError("Normalization tables must be a JSON object")

        defaults = cls()
        try:
            rules = tuple(
                (str(pattern), str(replacement))
                for pattern, replacement in data.get("normalization_rules", defaults.normalization_rules)
            )
            expansions = tuple(
                (str(trigger), tuple(str(term) for term in terms))
                for trigger, terms in data.get("context_expansions", defaults.context_expansions)
            )
            phrases = tuple(
                (str(phrase), str(title))
                for phrase, title in data.get("phrase_map", defaults.phrase_map)
            )
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Malformed normalization tables: {e}")

        return cls(
            normalization_rules=rules,
            context_expansions=expansions,
            phrase_map=phrases,
        )


def load_tables(path: str) -> NormalizationTables:
    """
    Load normalization tables from a JSON file.

    :raises: ConfigurationError if the file is missing or malformed
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot load normalization tables from {path}: {e}")

    return NormalizationTables.from_dict(data)
