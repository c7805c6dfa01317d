EVAL_CASES = [
    {
        "id": "wifi_informal",
        "question": "WiFi not working",
        "should_refuse": False,
        "expected_error": "Cannot Connect to Wi-Fi",
    },
    {
        "id": "http_404_code",
        "question": "getting error 404 on the intranet",
        "should_refuse": False,
        "expected_error": "404 Not Found",
    },
    {
        "id": "http_500_code",
        "question": "site shows 500",
        "should_refuse": False,
        "expected_error": "500 Internal Server Error",
    },
    {
        "id": "slow_abbreviation",
        "question": "my comp is running slow",
        "should_refuse": False,
        "expected_error": "Computer is Running Slow",
    },
    {
        "id": "bsod_acronym",
        "question": "bsod after update",
        "should_refuse": False,
        "expected_error": "Blue Screen of Death (BSOD)",
    },
    {
        "id": "default_printer",
        "question": "default printer keeps changing",
        "should_refuse": False,
        "expected_error": "My Default Printer Keeps Changing",
    },
    {
        "id": "display_typo",
        "question": "second dislay not detected",
        "should_refuse": False,
        "expected_error": "Second Monitor Not Detected",
    },
    {
        "id": "out_of_domain",
        "question": "quantum zebra",
        "should_refuse": True,
        "expected_error": None,
    },
]
