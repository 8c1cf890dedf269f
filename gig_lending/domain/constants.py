"""Protocol constants - integer widths, scoring tiers, rate table defaults"""

# Host integer widths
I128_MIN = -(2**127)
I128_MAX = 2**127 - 1
U64_MAX = 2**64 - 1

BPS_SCALE = 10_000  # Basis points (100% = 10000)

# Credit score bounds
BASE_CREDIT_SCORE = 300
MAX_CREDIT_SCORE = 850
PLATFORM_BONUS = 25  # Per gig platform, uncapped

# (threshold in whole currency units, bonus) - descending, first match wins
MONTHLY_INCOME_TIERS = ((3000, 200), (2000, 150), (1000, 100))
MONTHLY_INCOME_FLOOR_BONUS = 50
TOTAL_INCOME_TIERS = ((50000, 100), (25000, 50))

# Credit score threshold -> annual rate in bps
DEFAULT_INTEREST_RATES = {
    300: 2500,  # 25%
    400: 2000,  # 20%
    500: 1500,  # 15%
    600: 1200,  # 12%
    700: 1000,  # 10%
    800: 800,   # 8%
}

# Collateral must cover 150% of principal
MIN_COLLATERAL_RATIO_PCT = 150

# Liquidity providers
PROVIDER_APY_BPS = 800  # 8%

# Profile fields reset on every update
INITIAL_PAYMENT_HISTORY = 500
INITIAL_VERIFICATION_LEVEL = 3
