"""Static Microsoft timezone name to IANA identifier table.

Covers modern Windows zone identifiers (as emitted in TZID parameters by
Outlook/Exchange) and the legacy "(UTC+HH:MM) City, City" display strings
found in older feeds. Entries mapped to ``None`` have no IANA equivalent and
are resolved through their embedded UTC offset instead.

https://docs.microsoft.com/en-us/windows-hardware/manufacture/desktop/default-time-zones
"""

from types import MappingProxyType
from typing import Mapping, Optional

WINDOWS_ZONES: Mapping[str, Optional[str]] = MappingProxyType({
    "Dateline Standard Time": "Etc/GMT+12",
    "UTC-11": "Etc/GMT+11",
    "Aleutian Standard Time": "America/Adak",
    "Hawaiian Standard Time": "Pacific/Honolulu",
    "Marquesas Standard Time": "Pacific/Marquesas",
    "Alaskan Standard Time": "America/Anchorage",
    "UTC-09": "Etc/GMT+9",
    "Pacific Standard Time (Mexico)": "America/Tijuana",
    "UTC-08": "Etc/GMT+8",
    "Pacific Standard Time": "America/Los_Angeles",
    "US Mountain Standard Time": "America/Phoenix",
    "Mountain Standard Time (Mexico)": "America/Chihuahua",
    "Mountain Standard Time": "America/Denver",
    "Yukon Standard Time": "America/Whitehorse",
    "Central America Standard Time": "America/Guatemala",
    "Central Standard Time": "America/Chicago",
    "Easter Island Standard Time": "Pacific/Easter",
    "Central Standard Time (Mexico)": "America/Mexico_City",
    "Canada Central Standard Time": "America/Regina",
    "SA Pacific Standard Time": "America/Bogota",
    "Eastern Standard Time (Mexico)": "America/Cancun",
    "Eastern Standard Time": "America/New_York",
    "Haiti Standard Time": "America/Port-au-Prince",
    "Cuba Standard Time": "America/Havana",
    "US Eastern Standard Time": "America/Indianapolis",
    "Turks And Caicos Standard Time": "America/Grand_Turk",
    "Paraguay Standard Time": "America/Asuncion",
    "Atlantic Standard Time": "America/Halifax",
    "Venezuela Standard Time": "America/Caracas",
    "Central Brazilian Standard Time": "America/Cuiaba",
    "SA Western Standard Time": "America/La_Paz",
    "Pacific SA Standard Time": "America/Santiago",
    "Newfoundland Standard Time": "America/St_Johns",
    "Tocantins Standard Time": "America/Araguaina",
    "E. South America Standard Time": "America/Sao_Paulo",
    "SA Eastern Standard Time": "America/Cayenne",
    "Argentina Standard Time": "America/Buenos_Aires",
    "Greenland Standard Time": "America/Godthab",
    "Montevideo Standard Time": "America/Montevideo",
    "Magallanes Standard Time": "America/Punta_Arenas",
    "Saint Pierre Standard Time": "America/Miquelon",
    "Bahia Standard Time": "America/Bahia",
    "UTC-02": "Etc/GMT+2",
    "Azores Standard Time": "Atlantic/Azores",
    "Cape Verde Standard Time": "Atlantic/Cape_Verde",
    "UTC": "Etc/UTC",
    "GMT Standard Time": "Europe/London",
    "Greenwich Standard Time": "Atlantic/Reykjavik",
    "Sao Tome Standard Time": "Africa/Sao_Tome",
    "Morocco Standard Time": "Africa/Casablanca",
    "W. Europe Standard Time": "Europe/Berlin",
    "Central Europe Standard Time": "Europe/Budapest",
    "Romance Standard Time": "Europe/Paris",
    "Central European Standard Time": "Europe/Warsaw",
    "W. Central Africa Standard Time": "Africa/Lagos",
    "Jordan Standard Time": "Asia/Amman",
    "GTB Standard Time": "Europe/Bucharest",
    "Middle East Standard Time": "Asia/Beirut",
    "Egypt Standard Time": "Africa/Cairo",
    "E. Europe Standard Time": "Europe/Chisinau",
    "Syria Standard Time": "Asia/Damascus",
    "West Bank Standard Time": "Asia/Hebron",
    "South Africa Standard Time": "Africa/Johannesburg",
    "FLE Standard Time": "Europe/Kiev",
    "Israel Standard Time": "Asia/Jerusalem",
    "South Sudan Standard Time": "Africa/Juba",
    "Kaliningrad Standard Time": "Europe/Kaliningrad",
    "Sudan Standard Time": "Africa/Khartoum",
    "Libya Standard Time": "Africa/Tripoli",
    "Namibia Standard Time": "Africa/Windhoek",
    "Arabic Standard Time": "Asia/Baghdad",
    "Turkey Standard Time": "Europe/Istanbul",
    "Arab Standard Time": "Asia/Riyadh",
    "Belarus Standard Time": "Europe/Minsk",
    "Russian Standard Time": "Europe/Moscow",
    "E. Africa Standard Time": "Africa/Nairobi",
    "Iran Standard Time": "Asia/Tehran",
    "Arabian Standard Time": "Asia/Dubai",
    "Astrakhan Standard Time": "Europe/Astrakhan",
    "Azerbaijan Standard Time": "Asia/Baku",
    "Russia Time Zone 3": "Europe/Samara",
    "Mauritius Standard Time": "Indian/Mauritius",
    "Saratov Standard Time": "Europe/Saratov",
    "Georgian Standard Time": "Asia/Tbilisi",
    "Volgograd Standard Time": "Europe/Volgograd",
    "Caucasus Standard Time": "Asia/Yerevan",
    "Afghanistan Standard Time": "Asia/Kabul",
    "West Asia Standard Time": "Asia/Tashkent",
    "Ekaterinburg Standard Time": "Asia/Yekaterinburg",
    "Pakistan Standard Time": "Asia/Karachi",
    "Qyzylorda Standard Time": "Asia/Qyzylorda",
    "India Standard Time": "Asia/Calcutta",
    "Sri Lanka Standard Time": "Asia/Colombo",
    "Nepal Standard Time": "Asia/Katmandu",
    "Central Asia Standard Time": "Asia/Almaty",
    "Bangladesh Standard Time": "Asia/Dhaka",
    "Omsk Standard Time": "Asia/Omsk",
    "Myanmar Standard Time": "Asia/Rangoon",
    "SE Asia Standard Time": "Asia/Bangkok",
    "Altai Standard Time": "Asia/Barnaul",
    "W. Mongolia Standard Time": "Asia/Hovd",
    "North Asia Standard Time": "Asia/Krasnoyarsk",
    "N. Central Asia Standard Time": "Asia/Novosibirsk",
    "Tomsk Standard Time": "Asia/Tomsk",
    "China Standard Time": "Asia/Shanghai",
    "North Asia East Standard Time": "Asia/Irkutsk",
    "Singapore Standard Time": "Asia/Singapore",
    "W. Australia Standard Time": "Australia/Perth",
    "Taipei Standard Time": "Asia/Taipei",
    "Ulaanbaatar Standard Time": "Asia/Ulaanbaatar",
    "Aus Central W. Standard Time": "Australia/Eucla",
    "Transbaikal Standard Time": "Asia/Chita",
    "Tokyo Standard Time": "Asia/Tokyo",
    "North Korea Standard Time": "Asia/Pyongyang",
    "Korea Standard Time": "Asia/Seoul",
    "Yakutsk Standard Time": "Asia/Yakutsk",
    "Cen. Australia Standard Time": "Australia/Adelaide",
    "AUS Central Standard Time": "Australia/Darwin",
    "E. Australia Standard Time": "Australia/Brisbane",
    "AUS Eastern Standard Time": "Australia/Sydney",
    "West Pacific Standard Time": "Pacific/Port_Moresby",
    "Tasmania Standard Time": "Australia/Hobart",
    "Vladivostok Standard Time": "Asia/Vladivostok",
    "Lord Howe Standard Time": "Australia/Lord_Howe",
    "Bougainville Standard Time": "Pacific/Bougainville",
    "Russia Time Zone 10": "Asia/Srednekolymsk",
    "Magadan Standard Time": "Asia/Magadan",
    "Norfolk Standard Time": "Pacific/Norfolk",
    "Sakhalin Standard Time": "Asia/Sakhalin",
    "Central Pacific Standard Time": "Pacific/Guadalcanal",
    "Russia Time Zone 11": "Asia/Kamchatka",
    "New Zealand Standard Time": "Pacific/Auckland",
    "UTC+12": "Etc/GMT-12",
    "Fiji Standard Time": "Pacific/Fiji",
    "Chatham Islands Standard Time": "Pacific/Chatham",
    "UTC+13": "Etc/GMT-13",
    "Tonga Standard Time": "Pacific/Tongatapu",
    "Samoa Standard Time": "Pacific/Apia",
    "Line Islands Standard Time": "Pacific/Kiritimati",
    "(UTC-12:00) International Date Line West": "Etc/GMT+12",
    "(UTC-11:00) Midway Island, Samoa": "Pacific/Apia",
    "(UTC-10:00) Hawaii": "Pacific/Honolulu",
    "(UTC-09:00) Alaska": "America/Anchorage",
    "(UTC-08:00) Pacific Time (US & Canada); Tijuana": "America/Los_Angeles",
    "(UTC-08:00) Pacific Time (US and Canada); Tijuana": "America/Los_Angeles",
    "(UTC-07:00) Mountain Time (US & Canada)": "America/Denver",
    "(UTC-07:00) Mountain Time (US and Canada)": "America/Denver",
    "(UTC-07:00) Chihuahua, La Paz, Mazatlan": None,
    "(UTC-07:00) Arizona": "America/Phoenix",
    "(UTC-06:00) Central Time (US & Canada)": "America/Chicago",
    "(UTC-06:00) Central Time (US and Canada)": "America/Chicago",
    "(UTC-06:00) Saskatchewan": "America/Regina",
    "(UTC-06:00) Guadalajara, Mexico City, Monterrey": None,
    "(UTC-06:00) Central America": "America/Guatemala",
    "(UTC-05:00) Eastern Time (US & Canada)": "America/New_York",
    "(UTC-05:00) Eastern Time (US and Canada)": "America/New_York",
    "(UTC-05:00) Indiana (East)": "America/Indianapolis",
    "(UTC-05:00) Bogota, Lima, Quito": "America/Bogota",
    "(UTC-04:00) Atlantic Time (Canada)": "America/Halifax",
    "(UTC-04:00) Georgetown, La Paz, San Juan": "America/La_Paz",
    "(UTC-04:00) Santiago": "America/Santiago",
    "(UTC-03:30) Newfoundland": None,
    "(UTC-03:00) Brasilia": "America/Sao_Paulo",
    "(UTC-03:00) Georgetown": "America/Cayenne",
    "(UTC-03:00) Greenland": "America/Godthab",
    "(UTC-02:00) Mid-Atlantic": None,
    "(UTC-01:00) Azores": "Atlantic/Azores",
    "(UTC-01:00) Cape Verde Islands": "Atlantic/Cape_Verde",
    "(UTC) Greenwich Mean Time: Dublin, Edinburgh, Lisbon, London": None,
    "(UTC) Monrovia, Reykjavik": "Atlantic/Reykjavik",
    "(UTC+01:00) Belgrade, Bratislava, Budapest, Ljubljana, Prague": "Europe/Budapest",
    "(UTC+01:00) Sarajevo, Skopje, Warsaw, Zagreb": "Europe/Warsaw",
    "(UTC+01:00) Brussels, Copenhagen, Madrid, Paris": "Europe/Paris",
    "(UTC+01:00) Amsterdam, Berlin, Bern, Rome, Stockholm, Vienna": "Europe/Berlin",
    "(UTC+01:00) West Central Africa": "Africa/Lagos",
    "(UTC+02:00) Minsk": "Europe/Chisinau",
    "(UTC+02:00) Cairo": "Africa/Cairo",
    "(UTC+02:00) Helsinki, Kiev, Riga, Sofia, Tallinn, Vilnius": "Europe/Kiev",
    "(UTC+02:00) Athens, Bucharest, Istanbul": "Europe/Bucharest",
    "(UTC+02:00) Jerusalem": "Asia/Jerusalem",
    "(UTC+02:00) Harare, Pretoria": "Africa/Johannesburg",
    "(UTC+03:00) Moscow, St. Petersburg, Volgograd": "Europe/Moscow",
    "(UTC+03:00) Kuwait, Riyadh": "Asia/Riyadh",
    "(UTC+03:00) Nairobi": "Africa/Nairobi",
    "(UTC+03:00) Baghdad": "Asia/Baghdad",
    "(UTC+03:30) Tehran": "Asia/Tehran",
    "(UTC+04:00) Abu Dhabi, Muscat": "Asia/Dubai",
    "(UTC+04:00) Baku, Tbilisi, Yerevan": "Asia/Yerevan",
    "(UTC+04:30) Kabul": None,
    "(UTC+05:00) Ekaterinburg": "Asia/Yekaterinburg",
    "(UTC+05:00) Tashkent": "Asia/Tashkent",
    "(UTC+05:30) Chennai, Kolkata, Mumbai, New Delhi": "Asia/Calcutta",
    "(UTC+05:45) Kathmandu": "Asia/Katmandu",
    "(UTC+06:00) Astana, Dhaka": "Asia/Almaty",
    "(UTC+06:00) Sri Jayawardenepura": "Asia/Colombo",
    "(UTC+06:00) Almaty, Novosibirsk": "Asia/Novosibirsk",
    "(UTC+06:30) Yangon (Rangoon)": "Asia/Rangoon",
    "(UTC+07:00) Bangkok, Hanoi, Jakarta": "Asia/Bangkok",
    "(UTC+07:00) Krasnoyarsk": "Asia/Krasnoyarsk",
    "(UTC+08:00) Beijing, Chongqing, Hong Kong, Urumqi": "Asia/Shanghai",
    "(UTC+08:00) Kuala Lumpur, Singapore": "Asia/Singapore",
    "(UTC+08:00) Taipei": "Asia/Taipei",
    "(UTC+08:00) Perth": "Australia/Perth",
    "(UTC+08:00) Irkutsk, Ulaanbaatar": "Asia/Irkutsk",
    "(UTC+09:00) Seoul": "Asia/Seoul",
    "(UTC+09:00) Osaka, Sapporo, Tokyo": "Asia/Tokyo",
    "(UTC+09:00) Yakutsk": "Asia/Yakutsk",
    "(UTC+09:30) Darwin": "Australia/Darwin",
    "(UTC+09:30) Adelaide": "Australia/Adelaide",
    "(UTC+10:00) Canberra, Melbourne, Sydney": "Australia/Sydney",
    "(GMT+10:00) Canberra, Melbourne, Sydney": "Australia/Sydney",
    "(UTC+10:00) Brisbane": "Australia/Brisbane",
    "(UTC+10:00) Hobart": "Australia/Hobart",
    "(UTC+10:00) Vladivostok": "Asia/Vladivostok",
    "(UTC+10:00) Guam, Port Moresby": "Pacific/Port_Moresby",
    "(UTC+11:00) Magadan, Solomon Islands, New Caledonia": "Pacific/Guadalcanal",
    "(UTC+12:00) Fiji, Kamchatka, Marshall Is.": None,
    "(UTC+12:00) Auckland, Wellington": "Pacific/Auckland",
    "(UTC+13:00) Nukualofa": "Pacific/Tongatapu",
    "(UTC-03:00) Buenos Aires": "America/Buenos_Aires",
    "(UTC+02:00) Beirut": "Asia/Beirut",
    "(UTC+02:00) Amman": "Asia/Amman",
    "(UTC-06:00) Guadalajara, Mexico City, Monterrey - New": "America/Mexico_City",
    "(UTC-07:00) Chihuahua, La Paz, Mazatlan - New": "America/Chihuahua",
    "(UTC-08:00) Tijuana, Baja California": "America/Tijuana",
    "(UTC+02:00) Windhoek": "Africa/Windhoek",
    "(UTC+03:00) Tbilisi": "Asia/Tbilisi",
    "(UTC-04:00) Manaus": "America/Cuiaba",
    "(UTC-03:00) Montevideo": "America/Montevideo",
    "(UTC+04:00) Yerevan": None,
    "(UTC-04:30) Caracas": "America/Caracas",
    "(UTC) Casablanca": "Africa/Casablanca",
    "(UTC+05:00) Islamabad, Karachi": "Asia/Karachi",
    "(UTC+04:00) Port Louis": "Indian/Mauritius",
    "(UTC) Coordinated Universal Time": "Etc/UTC",
    "(UTC-04:00) Asuncion": "America/Asuncion",
    "(UTC+12:00) Petropavlovsk-Kamchatsky": None,
})
