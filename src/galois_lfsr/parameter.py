# LFSR Parameters
INTERNAL_SIZE = 16
OUTPUT_SIZE = 16
SEED = 0x0001
# x^16 + x^14 + x^13 + x^11 + 1, written MSB first
POLYNOMIAL = "1011010000000000"
FEEDBACK = "xnor"

# Env
RESET_CYCLES = 1
PERIOD_SEARCH_LIMIT = 1 << 20

# Config
ENV_PREFIX = "LFSR_"
