"""Sample portfolio served by the dashboard."""

SAMPLE_HOLDINGS = [
    {
        "symbol": "RELIANCE",
        "name": "Reliance Industries Ltd",
        "quantity": 50,
        "avg_price": 2450.0,
        "current_price": 2680.5,
        "sector": "Energy",
        "market_cap": "Large",
        "exchange": "NSE",
    },
    {
        "symbol": "INFY",
        "name": "Infosys Limited",
        "quantity": 100,
        "avg_price": 1800.0,
        "current_price": 2010.75,
        "sector": "Technology",
        "market_cap": "Large",
        "exchange": "NSE",
    },
    {
        "symbol": "TCS",
        "name": "Tata Consultancy Services",
        "quantity": 75,
        "avg_price": 3200.0,
        "current_price": 3450.25,
        "sector": "Technology",
        "market_cap": "Large",
        "exchange": "NSE",
    },
    {
        "symbol": "HDFCBANK",
        "name": "HDFC Bank Limited",
        "quantity": 80,
        "avg_price": 1650.0,
        "current_price": 1580.3,
        "sector": "Banking",
        "market_cap": "Large",
        "exchange": "NSE",
    },
    {
        "symbol": "ICICIBANK",
        "name": "ICICI Bank Limited",
        "quantity": 60,
        "avg_price": 1100.0,
        "current_price": 1235.8,
        "sector": "Banking",
        "market_cap": "Large",
        "exchange": "NSE",
    },
    {
        "symbol": "BHARTIARTL",
        "name": "Bharti Airtel Limited",
        "quantity": 120,
        "avg_price": 850.0,
        "current_price": 920.45,
        "sector": "Telecommunications",
        "market_cap": "Large",
        "exchange": "NSE",
    },
    {
        "symbol": "ITC",
        "name": "ITC Limited",
        "quantity": 200,
        "avg_price": 420.0,
        "current_price": 465.2,
        "sector": "Consumer Goods",
        "market_cap": "Large",
        "exchange": "NSE",
    },
    {
        "symbol": "BAJFINANCE",
        "name": "Bajaj Finance Limited",
        "quantity": 25,
        "avg_price": 6800.0,
        "current_price": 7150.6,
        "sector": "Financial Services",
        "market_cap": "Large",
        "exchange": "NSE",
    },
    {
        "symbol": "ASIANPAINT",
        "name": "Asian Paints Limited",
        "quantity": 40,
        "avg_price": 3100.0,
        "current_price": 2890.75,
        "sector": "Consumer Discretionary",
        "market_cap": "Large",
        "exchange": "NSE",
    },
    {
        "symbol": "MARUTI",
        "name": "Maruti Suzuki India Limited",
        "quantity": 30,
        "avg_price": 9500.0,
        "current_price": 10250.3,
        "sector": "Automotive",
        "market_cap": "Large",
        "exchange": "NSE",
    },
    {
        "symbol": "WIPRO",
        "name": "Wipro Limited",
        "quantity": 150,
        "avg_price": 450.0,
        "current_price": 485.6,
        "sector": "Technology",
        "market_cap": "Large",
        "exchange": "NSE",
    },
    {
        "symbol": "TATAMOTORS",
        "name": "Tata Motors Limited",
        "quantity": 100,
        "avg_price": 650.0,
        "current_price": 720.85,
        "sector": "Automotive",
        "market_cap": "Large",
        "exchange": "NSE",
    },
    {
        "symbol": "TECHM",
        "name": "Tech Mahindra Limited",
        "quantity": 80,
        "avg_price": 1200.0,
        "current_price": 1145.25,
        "sector": "Technology",
        "market_cap": "Large",
        "exchange": "NSE",
    },
    {
        "symbol": "AXISBANK",
        "name": "Axis Bank Limited",
        "quantity": 90,
        "avg_price": 980.0,
        "current_price": 1055.4,
        "sector": "Banking",
        "market_cap": "Large",
        "exchange": "NSE",
    },
    {
        "symbol": "SUNPHARMA",
        "name": "Sun Pharmaceutical Industries Ltd",
        "quantity": 60,
        "avg_price": 1150.0,
        "current_price": 1245.3,
        "sector": "Healthcare",
        "market_cap": "Large",
        "exchange": "NSE",
    },
]
