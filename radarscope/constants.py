"""
Hard-coded colours and layout numbers so every module can import them
without circular dependencies.
"""
from pathlib import Path

# -------- wire protocol --------
FRAME_DELIM = b"|"
FIELD_DELIM = b":"
MAX_ANGLE   = 180

# -------- colours (RGB) --------
GREEN      = (0, 180, 0)
BACKGROUND = (30, 30, 30)
INFO_BG    = (15, 15, 15)
BLIP_GREEN = 8                          # fixed G channel of the red blips

# -------- layout (unscaled px) --------
INFO_BAR_H   = 20                       # bottom strip for angle / distance
ORIGIN_R     = 3
RING_COUNT   = 5
RING_STEP_PX = 20                       # one ring per 10 cm at 2 px/cm
RING_STEP_CM = 10
GUIDE_ANGLES = (30, 60, 90, 120, 150)
GUIDE_LEN    = 104
SWEEP_LEN    = 100
BLIP_R       = 3
LABEL_GAP    = 3                        # label sits this far past a guide
LABEL_NUDGE  = 8                        # shift left for angles >= 90°

NOTHING_TEXT = "Nothing"

# -------- dirs --------
ROOT     = Path(__file__).resolve().parent.parent
LOG_DIR  = ROOT / "log"
CFG_PATH = ROOT / "radar_config.json"
