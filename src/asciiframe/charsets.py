# Brightness ramps, ordered dark to bright
DEFAULT_RAMP = " .:-=+*#%@"

DETAILED_RAMP = " .'`^\",:;Il!i><~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

# Block elements from empty to full
BLOCKS = " ░▒▓█"

RAMPS = {
    "default": DEFAULT_RAMP,
    "detailed": DETAILED_RAMP,
    "blocks": BLOCKS,
}
