"""Compact zone table used when no IANA database is available.

Each row is ``(country, zone_id, std_offset, dst_offset, std_abbr, dst_abbr,
continent, latitude, longitude, dst_rule)``. ``dst_rule`` packs the annual
transition pair as ``end_week<<12 | end_month<<8 | start_week<<4 |
start_month``; week ``0`` means the last Sunday of the month and a rule of
``0`` means the zone keeps standard time all year.

Row order matters. Lookups by offset, country code or abbreviation return the
first matching row, so the most representative zone for each key comes first.
"""

from __future__ import annotations

NO_DST = 0x0000
US = 0x1B23  # 2nd Sunday March -> 1st Sunday November
EU = 0x0A03  # last Sunday March -> last Sunday October
EG = 0x0A04  # last Sunday April -> last Sunday October
AU = 0x141A  # 1st Sunday October -> 1st Sunday April
NZ = 0x1409  # last Sunday September -> 1st Sunday April
CL = 0x1419  # 1st Sunday September -> 1st Sunday April

ZONE_ROWS: tuple[tuple[str, str, str, str, str, str, str, float, float, int], ...] = (
    # Europe
    ("GB", "Europe/London", "+00:00", "+01:00", "GMT", "BST", "Europe", 51.5083, -0.1253, EU),
    ("IE", "Europe/Dublin", "+00:00", "+01:00", "GMT", "IST", "Europe", 53.3333, -6.25, EU),
    ("PT", "Europe/Lisbon", "+00:00", "+01:00", "WET", "WEST", "Europe", 38.7167, -9.1333, EU),
    ("FR", "Europe/Paris", "+01:00", "+02:00", "CET", "CEST", "Europe", 48.8667, 2.3333, EU),
    ("DE", "Europe/Berlin", "+01:00", "+02:00", "CET", "CEST", "Europe", 52.5, 13.3667, EU),
    ("ES", "Europe/Madrid", "+01:00", "+02:00", "CET", "CEST", "Europe", 40.4, -3.6833, EU),
    ("IT", "Europe/Rome", "+01:00", "+02:00", "CET", "CEST", "Europe", 41.9, 12.4833, EU),
    ("NL", "Europe/Amsterdam", "+01:00", "+02:00", "CET", "CEST", "Europe", 52.3667, 4.9, EU),
    ("BE", "Europe/Brussels", "+01:00", "+02:00", "CET", "CEST", "Europe", 50.8333, 4.3333, EU),
    ("CH", "Europe/Zurich", "+01:00", "+02:00", "CET", "CEST", "Europe", 47.3833, 8.5333, EU),
    ("AT", "Europe/Vienna", "+01:00", "+02:00", "CET", "CEST", "Europe", 48.2167, 16.3333, EU),
    ("PL", "Europe/Warsaw", "+01:00", "+02:00", "CET", "CEST", "Europe", 52.25, 21.0, EU),
    ("CZ", "Europe/Prague", "+01:00", "+02:00", "CET", "CEST", "Europe", 50.0833, 14.4333, EU),
    ("HU", "Europe/Budapest", "+01:00", "+02:00", "CET", "CEST", "Europe", 47.5, 19.0833, EU),
    ("SE", "Europe/Stockholm", "+01:00", "+02:00", "CET", "CEST", "Europe", 59.3333, 18.05, EU),
    ("NO", "Europe/Oslo", "+01:00", "+02:00", "CET", "CEST", "Europe", 59.9167, 10.75, EU),
    ("DK", "Europe/Copenhagen", "+01:00", "+02:00", "CET", "CEST", "Europe", 55.6667, 12.5833, EU),
    ("RS", "Europe/Belgrade", "+01:00", "+02:00", "CET", "CEST", "Europe", 44.8333, 20.5, EU),
    ("GR", "Europe/Athens", "+02:00", "+03:00", "EET", "EEST", "Europe", 37.9667, 23.7167, EU),
    ("FI", "Europe/Helsinki", "+02:00", "+03:00", "EET", "EEST", "Europe", 60.1667, 24.9667, EU),
    ("RO", "Europe/Bucharest", "+02:00", "+03:00", "EET", "EEST", "Europe", 44.4333, 26.1, EU),
    ("BG", "Europe/Sofia", "+02:00", "+03:00", "EET", "EEST", "Europe", 42.6833, 23.3167, EU),
    ("UA", "Europe/Kyiv", "+02:00", "+03:00", "EET", "EEST", "Europe", 50.4333, 30.5167, EU),
    ("TR", "Europe/Istanbul", "+03:00", "+03:00", "TRT", "TRT", "Europe", 41.0167, 28.9667, NO_DST),
    ("RU", "Europe/Moscow", "+03:00", "+03:00", "MSK", "MSK", "Europe", 55.7558, 37.6178, NO_DST),
    ("BY", "Europe/Minsk", "+03:00", "+03:00", "MSK", "MSK", "Europe", 53.9, 27.5667, NO_DST),
    ("RU", "Europe/Samara", "+04:00", "+04:00", "SAMT", "SAMT", "Europe", 53.2, 50.15, NO_DST),
    # America
    ("US", "America/New_York", "-05:00", "-04:00", "EST", "EDT", "America", 40.7142, -74.0064, US),
    ("US", "America/Chicago", "-06:00", "-05:00", "CST", "CDT", "America", 41.85, -87.65, US),
    ("US", "America/Denver", "-07:00", "-06:00", "MST", "MDT", "America", 39.7392, -104.9842, US),
    ("US", "America/Phoenix", "-07:00", "-07:00", "MST", "MST", "America", 33.4483, -112.0733, NO_DST),
    ("US", "America/Los_Angeles", "-08:00", "-07:00", "PST", "PDT", "America", 34.0522, -118.2428, US),
    ("US", "America/Anchorage", "-09:00", "-08:00", "AKST", "AKDT", "America", 61.2181, -149.9003, US),
    ("US", "America/Detroit", "-05:00", "-04:00", "EST", "EDT", "America", 42.3314, -83.0458, US),
    ("US", "America/Indiana/Indianapolis", "-05:00", "-04:00", "EST", "EDT", "America", 39.7683, -86.1581, US),
    ("US", "America/Boise", "-07:00", "-06:00", "MST", "MDT", "America", 43.6136, -116.2025, US),
    ("CA", "America/Toronto", "-05:00", "-04:00", "EST", "EDT", "America", 43.65, -79.3833, US),
    ("CA", "America/Vancouver", "-08:00", "-07:00", "PST", "PDT", "America", 49.2667, -123.1167, US),
    ("CA", "America/Edmonton", "-07:00", "-06:00", "MST", "MDT", "America", 53.55, -113.4667, US),
    ("CA", "America/Winnipeg", "-06:00", "-05:00", "CST", "CDT", "America", 49.8833, -97.15, US),
    ("CA", "America/Regina", "-06:00", "-06:00", "CST", "CST", "America", 50.4, -104.65, NO_DST),
    ("CA", "America/Halifax", "-04:00", "-03:00", "AST", "ADT", "America", 44.65, -63.6, US),
    ("CA", "America/St_Johns", "-03:30", "-02:30", "NST", "NDT", "America", 47.5667, -52.7167, US),
    ("MX", "America/Mexico_City", "-06:00", "-06:00", "CST", "CST", "America", 19.4, -99.15, NO_DST),
    ("MX", "America/Cancun", "-05:00", "-05:00", "EST", "EST", "America", 21.0833, -86.7667, NO_DST),
    ("MX", "America/Tijuana", "-08:00", "-07:00", "PST", "PDT", "America", 32.5333, -117.0167, US),
    ("GT", "America/Guatemala", "-06:00", "-06:00", "CST", "CST", "America", 14.6333, -90.5167, NO_DST),
    ("CR", "America/Costa_Rica", "-06:00", "-06:00", "CST", "CST", "America", 9.9333, -84.0833, NO_DST),
    ("PA", "America/Panama", "-05:00", "-05:00", "EST", "EST", "America", 8.9667, -79.5333, NO_DST),
    ("CU", "America/Havana", "-05:00", "-04:00", "CST", "CDT", "America", 23.1333, -82.3667, US),
    ("JM", "America/Jamaica", "-05:00", "-05:00", "EST", "EST", "America", 17.9681, -76.7933, NO_DST),
    ("DO", "America/Santo_Domingo", "-04:00", "-04:00", "AST", "AST", "America", 18.4667, -69.9, NO_DST),
    ("PR", "America/Puerto_Rico", "-04:00", "-04:00", "AST", "AST", "America", 18.4683, -66.1061, NO_DST),
    ("CO", "America/Bogota", "-05:00", "-05:00", "COT", "COT", "America", 4.6, -74.0833, NO_DST),
    ("PE", "America/Lima", "-05:00", "-05:00", "PET", "PET", "America", -12.05, -77.05, NO_DST),
    ("EC", "America/Guayaquil", "-05:00", "-05:00", "ECT", "ECT", "America", -2.1667, -79.8333, NO_DST),
    ("VE", "America/Caracas", "-04:00", "-04:00", "VET", "VET", "America", 10.5, -66.9333, NO_DST),
    ("BO", "America/La_Paz", "-04:00", "-04:00", "BOT", "BOT", "America", -16.5, -68.15, NO_DST),
    ("BR", "America/Sao_Paulo", "-03:00", "-03:00", "BRT", "BRT", "America", -23.5333, -46.6167, NO_DST),
    ("BR", "America/Manaus", "-04:00", "-04:00", "AMT", "AMT", "America", -3.1333, -60.0167, NO_DST),
    ("BR", "America/Noronha", "-02:00", "-02:00", "FNT", "FNT", "America", -3.85, -32.4167, NO_DST),
    ("AR", "America/Argentina/Buenos_Aires", "-03:00", "-03:00", "ART", "ART", "America", -34.6, -58.45, NO_DST),
    ("CL", "America/Santiago", "-04:00", "-03:00", "CLT", "CLST", "America", -33.45, -70.6667, CL),
    ("PY", "America/Asuncion", "-03:00", "-03:00", "PYT", "PYT", "America", -25.2667, -57.6667, NO_DST),
    ("UY", "America/Montevideo", "-03:00", "-03:00", "UYT", "UYT", "America", -34.9092, -56.2125, NO_DST),
    ("GL", "America/Nuuk", "-02:00", "-01:00", "WGT", "WGST", "America", 64.1833, -51.75, EU),
    # Asia
    ("IN", "Asia/Kolkata", "+05:30", "+05:30", "IST", "IST", "Asia", 22.5333, 88.3667, NO_DST),
    ("CN", "Asia/Shanghai", "+08:00", "+08:00", "CST", "CST", "Asia", 31.2333, 121.4667, NO_DST),
    ("JP", "Asia/Tokyo", "+09:00", "+09:00", "JST", "JST", "Asia", 35.6544, 139.7447, NO_DST),
    ("KR", "Asia/Seoul", "+09:00", "+09:00", "KST", "KST", "Asia", 37.55, 126.9667, NO_DST),
    ("HK", "Asia/Hong_Kong", "+08:00", "+08:00", "HKT", "HKT", "Asia", 22.2833, 114.15, NO_DST),
    ("SG", "Asia/Singapore", "+08:00", "+08:00", "SGT", "SGT", "Asia", 1.2833, 103.85, NO_DST),
    ("PH", "Asia/Manila", "+08:00", "+08:00", "PHT", "PHT", "Asia", 14.5833, 121.0, NO_DST),
    ("TW", "Asia/Taipei", "+08:00", "+08:00", "CST", "CST", "Asia", 25.05, 121.5, NO_DST),
    ("MY", "Asia/Kuala_Lumpur", "+08:00", "+08:00", "MYT", "MYT", "Asia", 3.1667, 101.7, NO_DST),
    ("ID", "Asia/Jakarta", "+07:00", "+07:00", "WIB", "WIB", "Asia", -6.1667, 106.8, NO_DST),
    ("TH", "Asia/Bangkok", "+07:00", "+07:00", "ICT", "ICT", "Asia", 13.75, 100.5167, NO_DST),
    ("VN", "Asia/Ho_Chi_Minh", "+07:00", "+07:00", "ICT", "ICT", "Asia", 10.75, 106.6667, NO_DST),
    ("BD", "Asia/Dhaka", "+06:00", "+06:00", "BDT", "BDT", "Asia", 23.7167, 90.4167, NO_DST),
    ("MM", "Asia/Yangon", "+06:30", "+06:30", "MMT", "MMT", "Asia", 16.7833, 96.1667, NO_DST),
    ("PK", "Asia/Karachi", "+05:00", "+05:00", "PKT", "PKT", "Asia", 24.8667, 67.05, NO_DST),
    ("NP", "Asia/Kathmandu", "+05:45", "+05:45", "NPT", "NPT", "Asia", 27.7167, 85.3167, NO_DST),
    ("LK", "Asia/Colombo", "+05:30", "+05:30", "SLST", "SLST", "Asia", 6.9333, 79.85, NO_DST),
    ("UZ", "Asia/Tashkent", "+05:00", "+05:00", "UZT", "UZT", "Asia", 41.3333, 69.3, NO_DST),
    ("KZ", "Asia/Almaty", "+05:00", "+05:00", "ALMT", "ALMT", "Asia", 43.25, 76.95, NO_DST),
    ("AF", "Asia/Kabul", "+04:30", "+04:30", "AFT", "AFT", "Asia", 34.5167, 69.2, NO_DST),
    ("AE", "Asia/Dubai", "+04:00", "+04:00", "GST", "GST", "Asia", 25.3, 55.3, NO_DST),
    ("GE", "Asia/Tbilisi", "+04:00", "+04:00", "GET", "GET", "Asia", 41.7167, 44.8167, NO_DST),
    ("AM", "Asia/Yerevan", "+04:00", "+04:00", "AMT", "AMT", "Asia", 40.1833, 44.5, NO_DST),
    ("IR", "Asia/Tehran", "+03:30", "+03:30", "IRST", "IRST", "Asia", 35.6667, 51.4333, NO_DST),
    ("SA", "Asia/Riyadh", "+03:00", "+03:00", "AST", "AST", "Asia", 24.6333, 46.7167, NO_DST),
    ("IQ", "Asia/Baghdad", "+03:00", "+03:00", "AST", "AST", "Asia", 33.35, 44.4167, NO_DST),
    ("QA", "Asia/Qatar", "+03:00", "+03:00", "AST", "AST", "Asia", 25.2833, 51.5333, NO_DST),
    ("JO", "Asia/Amman", "+03:00", "+03:00", "AST", "AST", "Asia", 31.95, 35.9333, NO_DST),
    ("IL", "Asia/Jerusalem", "+02:00", "+03:00", "IST", "IDT", "Asia", 31.7806, 35.2239, EU),
    ("LB", "Asia/Beirut", "+02:00", "+03:00", "EET", "EEST", "Asia", 33.8833, 35.5, EU),
    ("RU", "Asia/Yekaterinburg", "+05:00", "+05:00", "YEKT", "YEKT", "Asia", 56.85, 60.6, NO_DST),
    ("RU", "Asia/Novosibirsk", "+07:00", "+07:00", "NOVT", "NOVT", "Asia", 55.0333, 82.9167, NO_DST),
    ("RU", "Asia/Vladivostok", "+10:00", "+10:00", "VLAT", "VLAT", "Asia", 43.1667, 131.9333, NO_DST),
    ("RU", "Asia/Kamchatka", "+12:00", "+12:00", "PETT", "PETT", "Asia", 53.0167, 158.65, NO_DST),
    ("MN", "Asia/Ulaanbaatar", "+08:00", "+08:00", "ULAT", "ULAT", "Asia", 47.9167, 106.8833, NO_DST),
    ("KP", "Asia/Pyongyang", "+09:00", "+09:00", "KST", "KST", "Asia", 39.0167, 125.75, NO_DST),
    # Australia
    ("AU", "Australia/Sydney", "+10:00", "+11:00", "AEST", "AEDT", "Australia", -33.8667, 151.2167, AU),
    ("AU", "Australia/Melbourne", "+10:00", "+11:00", "AEST", "AEDT", "Australia", -37.8167, 144.9667, AU),
    ("AU", "Australia/Brisbane", "+10:00", "+10:00", "AEST", "AEST", "Australia", -27.4667, 153.0333, NO_DST),
    ("AU", "Australia/Adelaide", "+09:30", "+10:30", "ACST", "ACDT", "Australia", -34.9167, 138.5833, AU),
    ("AU", "Australia/Darwin", "+09:30", "+09:30", "ACST", "ACST", "Australia", -12.4667, 130.8333, NO_DST),
    ("AU", "Australia/Perth", "+08:00", "+08:00", "AWST", "AWST", "Australia", -31.95, 115.85, NO_DST),
    ("AU", "Australia/Hobart", "+10:00", "+11:00", "AEST", "AEDT", "Australia", -42.8833, 147.3167, AU),
    ("AU", "Australia/Lord_Howe", "+10:30", "+11:00", "LHST", "LHDT", "Australia", -31.55, 159.0833, AU),
    # Pacific
    ("NZ", "Pacific/Auckland", "+12:00", "+13:00", "NZST", "NZDT", "Pacific", -36.8667, 174.7667, NZ),
    ("NZ", "Pacific/Chatham", "+12:45", "+13:45", "CHAST", "CHADT", "Pacific", -43.95, -176.55, NZ),
    ("US", "Pacific/Honolulu", "-10:00", "-10:00", "HST", "HST", "Pacific", 21.3069, -157.8583, NO_DST),
    ("FJ", "Pacific/Fiji", "+12:00", "+12:00", "FJT", "FJT", "Pacific", -18.1333, 178.4167, NO_DST),
    ("GU", "Pacific/Guam", "+10:00", "+10:00", "ChST", "ChST", "Pacific", 13.4667, 144.75, NO_DST),
    ("TO", "Pacific/Tongatapu", "+13:00", "+13:00", "TOT", "TOT", "Pacific", -21.1333, -175.2, NO_DST),
    ("WS", "Pacific/Apia", "+13:00", "+13:00", "WST", "WST", "Pacific", -13.8333, -171.7333, NO_DST),
    ("KI", "Pacific/Kiritimati", "+14:00", "+14:00", "LINT", "LINT", "Pacific", 1.8667, -157.3333, NO_DST),
    ("PF", "Pacific/Marquesas", "-09:30", "-09:30", "MART", "MART", "Pacific", -9.0, -139.5, NO_DST),
    ("PF", "Pacific/Tahiti", "-10:00", "-10:00", "TAHT", "TAHT", "Pacific", -17.5333, -149.5667, NO_DST),
    ("PN", "Pacific/Pitcairn", "-08:00", "-08:00", "PST", "PST", "Pacific", -25.0667, -130.0833, NO_DST),
    ("PG", "Pacific/Port_Moresby", "+10:00", "+10:00", "PGT", "PGT", "Pacific", -9.5, 147.1667, NO_DST),
    ("NC", "Pacific/Noumea", "+11:00", "+11:00", "NCT", "NCT", "Pacific", -22.2667, 166.45, NO_DST),
    ("VU", "Pacific/Efate", "+11:00", "+11:00", "VUT", "VUT", "Pacific", -17.6667, 168.4167, NO_DST),
    ("SB", "Pacific/Guadalcanal", "+11:00", "+11:00", "SBT", "SBT", "Pacific", -9.5333, 160.2, NO_DST),
    ("NF", "Pacific/Norfolk", "+11:00", "+12:00", "NFT", "NFDT", "Pacific", -29.05, 167.9667, AU),
    ("EC", "Pacific/Galapagos", "-06:00", "-06:00", "GALT", "GALT", "Pacific", -0.9, -89.6, NO_DST),
    ("CL", "Pacific/Easter", "-06:00", "-05:00", "EAST", "EASST", "Pacific", -27.15, -109.4333, CL),
    ("AS", "Pacific/Pago_Pago", "-11:00", "-11:00", "SST", "SST", "Pacific", -14.2667, -170.7, NO_DST),
    ("NU", "Pacific/Niue", "-11:00", "-11:00", "NUT", "NUT", "Pacific", -19.0167, -169.9167, NO_DST),
    ("CK", "Pacific/Rarotonga", "-10:00", "-10:00", "CKT", "CKT", "Pacific", -21.2333, -159.7667, NO_DST),
    ("MH", "Pacific/Majuro", "+12:00", "+12:00", "MHT", "MHT", "Pacific", 7.15, 171.2, NO_DST),
    ("PW", "Pacific/Palau", "+09:00", "+09:00", "PWT", "PWT", "Pacific", 7.3333, 134.4833, NO_DST),
    ("FM", "Pacific/Chuuk", "+10:00", "+10:00", "CHUT", "CHUT", "Pacific", 7.4167, 151.7833, NO_DST),
    # Africa
    ("CI", "Africa/Abidjan", "+00:00", "+00:00", "GMT", "GMT", "Africa", 5.3167, -4.0333, NO_DST),
    ("GH", "Africa/Accra", "+00:00", "+00:00", "GMT", "GMT", "Africa", 5.55, -0.2167, NO_DST),
    ("SN", "Africa/Dakar", "+00:00", "+00:00", "GMT", "GMT", "Africa", 14.6667, -17.4333, NO_DST),
    ("NG", "Africa/Lagos", "+01:00", "+01:00", "WAT", "WAT", "Africa", 6.45, 3.4, NO_DST),
    ("DZ", "Africa/Algiers", "+01:00", "+01:00", "CET", "CET", "Africa", 36.7833, 3.05, NO_DST),
    ("TN", "Africa/Tunis", "+01:00", "+01:00", "CET", "CET", "Africa", 36.8, 10.1833, NO_DST),
    ("MA", "Africa/Casablanca", "+01:00", "+01:00", "WEST", "WEST", "Africa", 33.65, -7.5833, NO_DST),
    ("CD", "Africa/Kinshasa", "+01:00", "+01:00", "WAT", "WAT", "Africa", -4.3, 15.3, NO_DST),
    ("AO", "Africa/Luanda", "+01:00", "+01:00", "WAT", "WAT", "Africa", -8.8, 13.2333, NO_DST),
    ("EG", "Africa/Cairo", "+02:00", "+03:00", "EET", "EEST", "Africa", 30.05, 31.25, EG),
    ("LY", "Africa/Tripoli", "+02:00", "+02:00", "EET", "EET", "Africa", 32.9, 13.1833, NO_DST),
    ("ZA", "Africa/Johannesburg", "+02:00", "+02:00", "SAST", "SAST", "Africa", -26.25, 28.0, NO_DST),
    ("MZ", "Africa/Maputo", "+02:00", "+02:00", "CAT", "CAT", "Africa", -25.9667, 32.5833, NO_DST),
    ("SD", "Africa/Khartoum", "+02:00", "+02:00", "CAT", "CAT", "Africa", 15.6, 32.5333, NO_DST),
    ("NA", "Africa/Windhoek", "+02:00", "+02:00", "CAT", "CAT", "Africa", -22.5667, 17.1, NO_DST),
    ("KE", "Africa/Nairobi", "+03:00", "+03:00", "EAT", "EAT", "Africa", -1.2833, 36.8167, NO_DST),
    ("ET", "Africa/Addis_Ababa", "+03:00", "+03:00", "EAT", "EAT", "Africa", 9.0333, 38.7, NO_DST),
    ("TZ", "Africa/Dar_es_Salaam", "+03:00", "+03:00", "EAT", "EAT", "Africa", -6.8, 39.2833, NO_DST),
    # Atlantic
    ("PT", "Atlantic/Azores", "-01:00", "+00:00", "AZOT", "AZOST", "Atlantic", 37.7333, -25.6667, EU),
    ("ES", "Atlantic/Canary", "+00:00", "+01:00", "WET", "WEST", "Atlantic", 28.1, -15.4, EU),
    ("PT", "Atlantic/Madeira", "+00:00", "+01:00", "WET", "WEST", "Atlantic", 32.6333, -16.9, EU),
    ("FO", "Atlantic/Faroe", "+00:00", "+01:00", "WET", "WEST", "Atlantic", 62.0167, -6.7667, EU),
    ("IS", "Atlantic/Reykjavik", "+00:00", "+00:00", "GMT", "GMT", "Atlantic", 64.15, -21.85, NO_DST),
    ("BM", "Atlantic/Bermuda", "-04:00", "-03:00", "AST", "ADT", "Atlantic", 32.2833, -64.7667, US),
    ("CV", "Atlantic/Cape_Verde", "-01:00", "-01:00", "CVT", "CVT", "Atlantic", 14.9167, -23.5167, NO_DST),
    ("GS", "Atlantic/South_Georgia", "-02:00", "-02:00", "GST", "GST", "Atlantic", -54.2667, -36.5333, NO_DST),
    ("FK", "Atlantic/Stanley", "-03:00", "-03:00", "FKST", "FKST", "Atlantic", -51.7, -57.85, NO_DST),
    # Indian
    ("MV", "Indian/Maldives", "+05:00", "+05:00", "MVT", "MVT", "Indian", 4.1667, 73.5, NO_DST),
    ("MU", "Indian/Mauritius", "+04:00", "+04:00", "MUT", "MUT", "Indian", -20.1667, 57.5, NO_DST),
    ("RE", "Indian/Reunion", "+04:00", "+04:00", "RET", "RET", "Indian", -20.8667, 55.4667, NO_DST),
    ("SC", "Indian/Mahe", "+04:00", "+04:00", "SCT", "SCT", "Indian", -4.6667, 55.4667, NO_DST),
    ("MG", "Indian/Antananarivo", "+03:00", "+03:00", "EAT", "EAT", "Indian", -18.9167, 47.5167, NO_DST),
    ("IO", "Indian/Chagos", "+06:00", "+06:00", "IOT", "IOT", "Indian", -7.3333, 72.4167, NO_DST),
    ("CC", "Indian/Cocos", "+06:30", "+06:30", "CCT", "CCT", "Indian", -12.1667, 96.9167, NO_DST),
    ("CX", "Indian/Christmas", "+07:00", "+07:00", "CXT", "CXT", "Indian", -10.4167, 105.7167, NO_DST),
    ("TF", "Indian/Kerguelen", "+05:00", "+05:00", "TFT", "TFT", "Indian", -49.35, 70.2167, NO_DST),
    # Antarctica
    ("AQ", "Antarctica/McMurdo", "+12:00", "+13:00", "NZST", "NZDT", "Antarctica", -77.8333, 166.6, NZ),
    ("AQ", "Antarctica/Casey", "+08:00", "+08:00", "AWST", "AWST", "Antarctica", -66.2833, 110.5167, NO_DST),
    ("AQ", "Antarctica/Vostok", "+05:00", "+05:00", "VOST", "VOST", "Antarctica", -78.4, 106.9, NO_DST),
    ("AQ", "Antarctica/Palmer", "-03:00", "-03:00", "CLT", "CLT", "Antarctica", -64.8, -64.1, NO_DST),
    ("AQ", "Antarctica/Troll", "+00:00", "+02:00", "GMT", "CEST", "Antarctica", -72.0114, 2.535, EU),
    # Legacy spellings, kept last so canonical ids win every tie
    ("IN", "Asia/Calcutta", "+05:30", "+05:30", "IST", "IST", "Asia", 22.5333, 88.3667, NO_DST),
    ("VN", "Asia/Saigon", "+07:00", "+07:00", "ICT", "ICT", "Asia", 10.75, 106.6667, NO_DST),
    ("NP", "Asia/Katmandu", "+05:45", "+05:45", "NPT", "NPT", "Asia", 27.7167, 85.3167, NO_DST),
    ("UA", "Europe/Kiev", "+02:00", "+03:00", "EET", "EEST", "Europe", 50.4333, 30.5167, EU),
    ("AR", "America/Buenos_Aires", "-03:00", "-03:00", "ART", "ART", "America", -34.6, -58.45, NO_DST),
)
