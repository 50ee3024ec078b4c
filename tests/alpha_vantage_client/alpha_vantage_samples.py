"""Vendor JSON payloads captured from Alpha Vantage responses, trimmed for tests."""

QUOTE_SAMPLE = {
    "Global Quote": {
        "01. symbol": "MSFT",
        "02. open": "415.2300",
        "03. high": "418.9900",
        "04. low": "413.0100",
        "05. price": "417.8800",
        "06. volume": "18524633",
        "07. latest trading day": "2024-05-03",
        "08. previous close": "414.5300",
        "09. change": "3.3500",
        "10. change percent": "0.8081%",
    }
}

EXCHANGE_SAMPLE = {
    "Realtime Currency Exchange Rate": {
        "1. From_Currency Code": "BTC",
        "2. From_Currency Name": "Bitcoin",
        "3. To_Currency Code": "EUR",
        "4. To_Currency Name": "Euro",
        "5. Exchange Rate": "58510.12000000",
        "6. Last Refreshed": "2024-05-03 18:02:01",
        "7. Time Zone": "UTC",
        "8. Bid Price": "58509.91000000",
        "9. Ask Price": "58510.55000000",
    }
}

DAILY_SAMPLE = {
    "Meta Data": {
        "1. Information": "Daily Prices (open, high, low, close) and Volumes",
        "2. Symbol": "IBM",
        "3. Last Refreshed": "2024-05-03",
        "4. Output Size": "Compact",
        "5. Time Zone": "US/Eastern",
    },
    "Time Series (Daily)": {
        "2024-05-03": {
            "1. open": "166.2000",
            "2. high": "166.7400",
            "3. low": "164.9200",
            "4. close": "165.7100",
            "5. volume": "3587234",
        },
        "2024-05-02": {
            "1. open": "164.3500",
            "2. high": "166.0900",
            "3. low": "164.1400",
            "4. close": "165.6900",
            "5. volume": "4224104",
        },
        "2024-05-01": {
            "1. open": "165.6900",
            "2. high": "166.2700",
            "3. low": "164.3000",
            "4. close": "164.4300",
            "5. volume": "4030384",
        },
    },
}

INTRADAY_ADJUSTED_SAMPLE = {
    "Meta Data": {
        "1. Information": "Intraday (5min) open, high, low, close prices and volume",
        "2. Symbol": "IBM",
        "3. Last Refreshed": "2024-05-03 19:55:00",
        "4. Interval": "5min",
        "5. Output Size": "Compact",
        "6. Time Zone": "US/Eastern",
    },
    "Time Series (5min)": {
        "2024-05-03 19:55:00": {
            "1. open": "165.7100",
            "2. high": "165.7500",
            "3. low": "165.6000",
            "4. close": "165.6500",
            "5. volume": "1035",
        },
        "2024-05-03 19:50:00": {
            "1. open": "165.7000",
            "2. high": "165.7100",
            "3. low": "165.7000",
            "4. close": "165.7100",
            "5. volume": "128",
        },
    },
}

DAILY_ADJUSTED_SAMPLE = {
    "Meta Data": {
        "1. Information": "Daily Time Series with Splits and Dividend Events",
        "2. Symbol": "IBM",
        "3. Last Refreshed": "2024-05-03",
        "4. Output Size": "Compact",
        "5. Time Zone": "US/Eastern",
    },
    "Time Series (Daily)": {
        "2024-05-03": {
            "1. open": "166.2000",
            "2. high": "166.7400",
            "3. low": "164.9200",
            "4. close": "165.7100",
            "5. adjusted close": "165.7100",
            "6. volume": "3587234",
            "7. dividend amount": "0.0000",
            "8. split coefficient": "1.0",
        }
    },
}

FOREX_WEEKLY_SAMPLE = {
    "Meta Data": {
        "1. Information": "Forex Weekly Prices (open, high, low, close)",
        "2. From Symbol": "EUR",
        "3. To Symbol": "USD",
        "4. Last Refreshed": "2024-05-03 19:55:00",
        "5. Time Zone": "UTC",
    },
    "Time Series FX (Weekly)": {
        "2024-05-03": {"1. open": "1.06920", "2. high": "1.07910", "3. low": "1.06490", "4. close": "1.07600"},
        "2024-04-26": {"1. open": "1.06540", "2. high": "1.07520", "3. low": "1.06010", "4. close": "1.06930"},
    },
}

CRYPTO_SAMPLE = {
    "Meta Data": {
        "1. Information": "Daily Prices and Volumes for Digital Currency",
        "2. Digital Currency Code": "BTC",
        "3. Digital Currency Name": "Bitcoin",
        "4. Market Code": "EUR",
        "5. Market Name": "Euro",
        "6. Last Refreshed": "2024-05-03 00:00:00",
        "7. Time Zone": "UTC",
    },
    "Time Series (Digital Currency Daily)": {
        "2024-05-03": {
            "1. open": "55170.12000000",
            "2. high": "58952.87000000",
            "3. low": "54821.50000000",
            "4. close": "58510.12000000",
            "5. volume": "612.59743340",
        },
        "2024-05-02": {
            "1. open": "53911.01000000",
            "2. high": "55367.88000000",
            "3. low": "53200.00000000",
            "4. close": "55170.12000000",
            "5. volume": "701.12044567",
        },
    },
}

CRYPTO_LEGACY_SAMPLE = {
    "Meta Data": {
        "1. Information": "Daily Prices and Volumes for Digital Currency",
        "2. Digital Currency Code": "BTC",
        "3. Digital Currency Name": "Bitcoin",
        "4. Market Code": "CNY",
        "5. Market Name": "Chinese Yuan",
        "6. Last Refreshed": "2023-02-10 00:00:00",
        "7. Time Zone": "UTC",
    },
    "Time Series (Digital Currency Daily)": {
        "2023-02-10": {
            "1a. open (CNY)": "153291.06",
            "1b. open (USD)": "22541.00",
            "2a. high (CNY)": "153617.44",
            "2b. high (USD)": "22588.99",
            "3a. low (CNY)": "149939.06",
            "3b. low (USD)": "22048.11",
            "4a. close (CNY)": "150614.30",
            "4b. close (USD)": "22147.40",
            "5. volume": "11265.91",
            "6. market cap (USD)": "11265.91",
        }
    },
}

SMA_SAMPLE = {
    "Meta Data": {
        "1: Symbol": "IBM",
        "2: Indicator": "Simple Moving Average (SMA)",
        "3: Last Refreshed": "2024-05-03",
        "4: Interval": "weekly",
        "5: Time Period": 10,
        "6: Series Type": "open",
        "7: Time Zone": "US/Eastern",
    },
    "Technical Analysis: SMA": {
        "2024-05-03": {"SMA": "176.5960"},
        "2024-04-26": {"SMA": "177.8710"},
    },
}

MACD_SAMPLE = {
    "Meta Data": {
        "1: Symbol": "IBM",
        "2: Indicator": "Moving Average Convergence/Divergence (MACD)",
        "3: Last Refreshed": "2024-05-03",
        "4: Interval": "daily",
        "5.1: Fast Period": 12,
        "5.2: Slow Period": 26,
        "5.3: Signal Period": 9,
        "6: Series Type": "open",
        "7: Time Zone": "US/Eastern",
    },
    "Technical Analysis: MACD": {
        "2024-05-03": {"MACD": "-4.1512", "MACD_Hist": "0.3015", "MACD_Signal": "-4.4527"},
    },
}

EARNINGS_SAMPLE = {
    "symbol": "IBM",
    "annualEarnings": [
        {"fiscalDateEnding": "2023-12-31", "reportedEPS": "9.61"},
        {"fiscalDateEnding": "2022-12-31", "reportedEPS": "9.12"},
    ],
    "quarterlyEarnings": [
        {
            "fiscalDateEnding": "2024-03-31",
            "reportedDate": "2024-04-24",
            "reportedEPS": "1.68",
            "estimatedEPS": "1.6",
            "surprise": "0.08",
            "surprisePercentage": "5",
            "reportTime": "post-market",
        },
        {
            "fiscalDateEnding": "1996-03-31",
            "reportedDate": "1996-04-18",
            "reportedEPS": "1.23",
            "estimatedEPS": "None",
            "surprise": "0",
            "surprisePercentage": "None",
        },
    ],
}

ECONOMIC_SAMPLE = {
    "name": "Real Gross Domestic Product per Capita",
    "interval": "quarterly",
    "unit": "Chained 2012 Dollars",
    "data": [
        {"date": "2024-01-01", "value": "67053.0"},
        {"date": "2023-10-01", "value": "."},
    ],
}

SECTOR_SAMPLE = {
    "Meta Data": {
        "Information": "US Sector Performance (realtime & historical)",
        "Last Refreshed": "2024-05-03 16:20:01 US/Eastern",
    },
    "Rank A: Real-Time Performance": {"Energy": "1.07%", "Utilities": "-0.36%"},
    "Rank B: 1 Day Performance": {"Energy": "0.52%", "Utilities": "0.11%"},
}

SEARCH_SAMPLE = {
    "bestMatches": [
        {
            "1. symbol": "BA",
            "2. name": "Boeing Company",
            "3. type": "Equity",
            "4. region": "United States",
            "5. marketOpen": "09:30",
            "6. marketClose": "16:00",
            "7. timezone": "UTC-04",
            "8. currency": "USD",
            "9. matchScore": "1.0000",
        },
        {
            "1. symbol": "BAB",
            "2. name": "Invesco Taxable Municipal Bond ETF",
            "3. type": "ETF",
            "4. region": "United States",
            "5. marketOpen": "09:30",
            "6. marketClose": "16:00",
            "7. timezone": "UTC-04",
            "8. currency": "USD",
            "9. matchScore": "0.8000",
        },
    ]
}

