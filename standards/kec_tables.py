from core.models import InsulationClass, System

# Fixed ambient baseline of the ampacity tables: 30°C in air, 20°C in ground.
# No temperature correction is applied on top of it.
AMBIENT_BASELINE_C = {"air": 30.0, "ground": 20.0}

# KEC 232.2 - cables in conduit may occupy at most 1/3 of the inner area
MAX_FILL_RATIO = 0.33
NONE_FOUND = "none found"

# Cable type used for the protective (ground) conductor in the conduit
GROUND_WIRE_TYPE = "HFIX"

# Nominal cross-sections (mm²)
SIZES_STANDARD = (1.5, 2.5, 4, 6, 10, 16, 25, 35, 50, 70, 95, 120, 150, 185, 240, 300)
SIZES_EXTENDED = SIZES_STANDARD + (400, 500)

# Core configurations
# Format: (Code, Name, Cores, Current-carrying conductors, Systems)
# 4C carries a neutral, KEC counts it as 3 loaded conductors
CORE_CONFIGURATIONS = [
    ("1C", "1C (single-core)", 1, 1, (System.SINGLE_PHASE, System.THREE_PHASE)),
    ("2C", "2C (1Φ 2-wire)", 2, 2, (System.SINGLE_PHASE,)),
    ("3C", "3C (1Φ 3-wire / 3Φ 3-wire)", 3, 3, (System.SINGLE_PHASE, System.THREE_PHASE)),
    ("4C", "4C (3Φ 4-wire)", 4, 3, (System.THREE_PHASE,)),
]

SINGLE_CORE = ("1C",)
MULTI_CORE = ("2C", "3C", "4C")
ALL_CORES = SINGLE_CORE + MULTI_CORE

# KEC cable types (0.6/1kV and 450/750V)
# Format: (Code, Name, Description, Insulation, Max Temp °C, Sizes, Cores)
CABLE_TYPES = [
    ("HFIX", "HFIX (low-smoke flame-retardant wire)",
     "KS C 3341, halogen-free flame-retardant polyolefin insulation",
     InsulationClass.XLPE, 90, SIZES_STANDARD, SINGLE_CORE),
    ("TFR-CV", "TFR-CV (flame-retardant tray cable)",
     "0.6/1kV XLPE insulated, flame-retardant PVC sheath",
     InsulationClass.XLPE, 90, SIZES_EXTENDED, ALL_CORES),
    ("CV", "CV (general power cable)",
     "0.6/1kV XLPE insulated, PVC sheath",
     InsulationClass.XLPE, 90, SIZES_EXTENDED, ALL_CORES),
    ("FR-CV", "FR-CV (fire-resistant cable)",
     "0.6/1kV fire-resistant XLPE insulated",
     InsulationClass.XLPE, 90, SIZES_STANDARD, ALL_CORES),
    ("TFR-8", "TFR-8 (heat-resistant cable)",
     "0.6/1kV heat-resistant XLPE insulated",
     InsulationClass.XLPE, 90, SIZES_STANDARD, ALL_CORES),
]

# IEC 60364-5-52 reference installation methods
# Format: (Code, Name, Description, Applicable cores)
INSTALL_METHODS = [
    ("A1", "A1: conduit in insulated wall (single-core)",
     "Conduit in thermally insulated wall (insulated wire / single-core cable)", SINGLE_CORE),
    ("A2", "A2: conduit in insulated wall (multi-core)",
     "Conduit in thermally insulated wall (multi-core cable)", MULTI_CORE),
    ("B1", "B1: conduit on wall (single-core)",
     "Conduit on a wooden or masonry wall (insulated wire / single-core cable)", SINGLE_CORE),
    ("B2", "B2: conduit on wall (multi-core)",
     "Conduit on a wooden or masonry wall (multi-core cable)", MULTI_CORE),
    ("C", "C: clipped direct to wall/ceiling",
     "Clipped direct to wall or ceiling (in air)", ALL_CORES),
    ("D1", "D1: underground duct",
     "Cable in underground duct", ALL_CORES),
    ("D2", "D2: direct buried",
     "Cable buried direct in ground", MULTI_CORE),
    ("E", "E: cable tray (single-core)",
     "Perforated cable tray (single-core)", SINGLE_CORE),
    ("F", "F: cable tray (multi-core)",
     "Perforated cable tray (multi-core)", MULTI_CORE),
]

# KEC / IEC 60364-5-52 allowable current (A), copper conductors
# Each row is aligned with SIZES_EXTENDED.
# Format: {(Insulation, Method): [(2 loaded, 3 loaded), ...]}
AMPACITY_ROWS = {
    # PVC 70°C - Table B.52.4 (A1..D2), B.52.10 / B.52.11 (E, F)
    (InsulationClass.PVC, "A1"): [
        (14.5, 13.5), (19.5, 18.0), (26.0, 24.0), (34.0, 31.0), (46.0, 42.0), (61.0, 56.0),
        (80.0, 73.0), (99.0, 89.0), (119.0, 108.0), (151.0, 136.0), (182.0, 164.0), (210.0, 188.0),
        (240.0, 216.0), (273.0, 245.0), (321.0, 286.0), (367.0, 328.0), (424.0, 379.0), (488.0, 436.0)],
    (InsulationClass.PVC, "A2"): [
        (14.0, 13.0), (18.5, 17.5), (25.0, 23.0), (32.0, 29.0), (43.0, 39.0), (57.0, 52.0),
        (75.0, 68.0), (92.0, 83.0), (110.0, 99.0), (139.0, 125.0), (167.0, 150.0), (192.0, 172.0),
        (219.0, 196.0), (248.0, 223.0), (291.0, 261.0), (334.0, 298.0), (386.0, 345.0), (444.0, 397.0)],
    (InsulationClass.PVC, "B1"): [
        (17.5, 15.5), (24.0, 21.0), (32.0, 28.0), (41.0, 36.0), (57.0, 50.0), (76.0, 68.0),
        (101.0, 89.0), (125.0, 110.0), (151.0, 134.0), (192.0, 171.0), (232.0, 207.0), (269.0, 239.0),
        (309.0, 275.0), (353.0, 314.0), (415.0, 369.0), (477.0, 423.0), (555.0, 490.0), (642.0, 565.0)],
    (InsulationClass.PVC, "B2"): [
        (16.5, 15.0), (23.0, 20.0), (30.0, 27.0), (38.0, 34.0), (52.0, 46.0), (69.0, 62.0),
        (90.0, 80.0), (111.0, 99.0), (133.0, 118.0), (168.0, 149.0), (201.0, 179.0), (232.0, 206.0),
        (265.0, 236.0), (300.0, 268.0), (351.0, 313.0), (401.0, 358.0), (464.0, 414.0), (533.0, 476.0)],
    (InsulationClass.PVC, "C"): [
        (19.5, 17.5), (27.0, 24.0), (36.0, 32.0), (46.0, 41.0), (63.0, 57.0), (85.0, 76.0),
        (112.0, 96.0), (138.0, 119.0), (168.0, 144.0), (213.0, 184.0), (258.0, 223.0), (299.0, 259.0),
        (344.0, 299.0), (392.0, 341.0), (461.0, 403.0), (530.0, 464.0), (614.0, 545.0), (707.0, 638.0)],
    (InsulationClass.PVC, "D1"): [
        (22.0, 18.0), (29.0, 24.0), (37.0, 30.0), (46.0, 38.0), (61.0, 50.0), (79.0, 64.0),
        (101.0, 82.0), (122.0, 98.0), (144.0, 116.0), (178.0, 143.0), (211.0, 169.0), (240.0, 192.0),
        (271.0, 217.0), (304.0, 243.0), (351.0, 280.0), (396.0, 316.0), (454.0, 363.0), (513.0, 410.0)],
    (InsulationClass.PVC, "D2"): [
        (24.0, 19.0), (32.0, 24.0), (41.0, 33.0), (51.0, 41.0), (67.0, 54.0), (87.0, 70.0),
        (112.0, 92.0), (136.0, 110.0), (161.0, 130.0), (200.0, 162.0), (239.0, 193.0), (273.0, 220.0),
        (310.0, 246.0), (349.0, 278.0), (404.0, 320.0), (458.0, 359.0), (524.0, 414.0), (590.0, 467.0)],
    (InsulationClass.PVC, "E"): [
        (22.0, 18.5), (30.0, 25.0), (40.0, 34.0), (51.0, 43.0), (70.0, 60.0), (94.0, 80.0),
        (119.0, 101.0), (148.0, 126.0), (180.0, 153.0), (232.0, 196.0), (282.0, 238.0), (328.0, 276.0),
        (379.0, 319.0), (434.0, 364.0), (514.0, 430.0), (593.0, 497.0), (694.0, 592.0), (806.0, 706.0)],
    (InsulationClass.PVC, "F"): [
        (25.0, 21.0), (34.0, 28.0), (45.0, 38.0), (58.0, 48.0), (79.0, 67.0), (105.0, 89.0),
        (133.0, 113.0), (166.0, 141.0), (201.0, 171.0), (259.0, 219.0), (315.0, 266.0), (367.0, 309.0),
        (424.0, 357.0), (486.0, 408.0), (575.0, 482.0), (664.0, 557.0), (777.0, 664.0), (903.0, 791.0)],

    # XLPE 90°C - Table B.52.5 (A1..D2), B.52.12 / B.52.13 (E, F)
    (InsulationClass.XLPE, "A1"): [
        (19.5, 17.0), (26.0, 23.0), (35.0, 31.0), (45.0, 40.0), (61.0, 54.0), (81.0, 73.0),
        (106.0, 95.0), (131.0, 117.0), (158.0, 141.0), (200.0, 179.0), (241.0, 216.0), (278.0, 249.0),
        (318.0, 285.0), (362.0, 324.0), (424.0, 380.0), (486.0, 435.0), (561.0, 503.0), (645.0, 578.0)],
    (InsulationClass.XLPE, "A2"): [
        (18.5, 16.5), (25.0, 22.0), (33.0, 30.0), (42.0, 38.0), (57.0, 51.0), (76.0, 68.0),
        (99.0, 89.0), (121.0, 109.0), (145.0, 130.0), (183.0, 164.0), (220.0, 197.0), (253.0, 227.0),
        (290.0, 259.0), (329.0, 295.0), (386.0, 346.0), (442.0, 396.0), (511.0, 458.0), (587.0, 526.0)],
    (InsulationClass.XLPE, "B1"): [
        (23.0, 20.0), (31.0, 28.0), (42.0, 37.0), (54.0, 48.0), (75.0, 66.0), (100.0, 88.0),
        (133.0, 117.0), (164.0, 144.0), (198.0, 175.0), (253.0, 222.0), (306.0, 269.0), (354.0, 312.0),
        (407.0, 358.0), (464.0, 408.0), (546.0, 481.0), (628.0, 553.0), (732.0, 644.0), (846.0, 745.0)],
    (InsulationClass.XLPE, "B2"): [
        (22.0, 19.5), (30.0, 27.0), (40.0, 35.0), (51.0, 45.0), (69.0, 62.0), (91.0, 82.0),
        (119.0, 107.0), (146.0, 131.0), (175.0, 158.0), (221.0, 200.0), (265.0, 240.0), (305.0, 276.0),
        (349.0, 316.0), (395.0, 358.0), (462.0, 419.0), (528.0, 479.0), (609.0, 553.0), (698.0, 635.0)],
    (InsulationClass.XLPE, "C"): [
        (24.0, 22.0), (33.0, 30.0), (45.0, 40.0), (58.0, 52.0), (80.0, 71.0), (107.0, 96.0),
        (138.0, 119.0), (171.0, 147.0), (209.0, 179.0), (269.0, 229.0), (328.0, 278.0), (382.0, 322.0),
        (441.0, 371.0), (506.0, 424.0), (599.0, 500.0), (693.0, 576.0), (812.0, 673.0), (942.0, 778.0)],
    (InsulationClass.XLPE, "D1"): [
        (28.0, 22.0), (36.0, 29.0), (46.0, 37.0), (57.0, 46.0), (75.0, 60.0), (97.0, 77.0),
        (123.0, 99.0), (149.0, 119.0), (176.0, 140.0), (218.0, 173.0), (259.0, 204.0), (295.0, 233.0),
        (334.0, 263.0), (376.0, 295.0), (434.0, 340.0), (492.0, 384.0), (565.0, 441.0), (641.0, 499.0)],
    (InsulationClass.XLPE, "D2"): [
        (31.0, 24.0), (41.0, 31.0), (52.0, 40.0), (65.0, 50.0), (85.0, 66.0), (110.0, 85.0),
        (141.0, 109.0), (170.0, 132.0), (202.0, 156.0), (251.0, 193.0), (300.0, 229.0), (343.0, 261.0),
        (390.0, 296.0), (440.0, 333.0), (510.0, 385.0), (578.0, 436.0), (664.0, 500.0), (753.0, 566.0)],
    (InsulationClass.XLPE, "E"): [
        (26.0, 23.0), (36.0, 32.0), (49.0, 42.0), (63.0, 54.0), (86.0, 75.0), (115.0, 100.0),
        (149.0, 127.0), (185.0, 158.0), (225.0, 192.0), (289.0, 246.0), (352.0, 298.0), (410.0, 346.0),
        (473.0, 399.0), (542.0, 456.0), (641.0, 538.0), (741.0, 621.0), (868.0, 742.0), (1008.0, 887.0)],
    (InsulationClass.XLPE, "F"): [
        (29.0, 25.0), (40.0, 35.0), (55.0, 47.0), (71.0, 60.0), (96.0, 83.0), (128.0, 111.0),
        (166.0, 141.0), (206.0, 176.0), (251.0, 214.0), (323.0, 274.0), (393.0, 332.0), (458.0, 386.0),
        (529.0, 445.0), (606.0, 509.0), (717.0, 601.0), (829.0, 694.0), (971.0, 828.0), (1127.0, 990.0)],
}

# KEC Table B.52.17 - Grouping factors for bunched circuits
# Format: {Max_Circuits: Factor}
GROUPING_FACTORS = {
    1: 1.00,
    2: 0.80,
    3: 0.70,
    4: 0.65,
    5: 0.60,
    6: 0.57,
    7: 0.54,
    8: 0.52,
    9: 0.50,
    12: 0.45,  # 10-12 circuits
    16: 0.41,  # 13-16
    20: 0.38,  # 17-20
}

# Cable outer diameters (mm), manufacturer data
# Format: {(Cable type, Cores): {Size: OD}}
OUTER_DIAMETERS = {
    ("HFIX", "1C"): {
        1.5: 3.3, 2.5: 4.0, 4: 4.6, 6: 5.2, 10: 6.5, 16: 8.0, 25: 10.1, 35: 11.3,
        50: 13.2, 70: 15.5, 95: 18.0, 120: 20.0, 150: 22.5, 185: 25.0, 240: 28.5, 300: 32.0},
    ("TFR-CV", "1C"): {
        1.5: 6.3, 2.5: 6.7, 4: 7.2, 6: 7.8, 10: 9.4, 16: 10.0, 25: 12.0, 35: 13.0,
        50: 14.5, 70: 16.0, 95: 18.5, 120: 20.0, 150: 22.0, 185: 24.0, 240: 27.0, 300: 30.0,
        400: 34.0, 500: 37.0},
    ("TFR-CV", "2C"): {
        1.5: 11.0, 2.5: 12.0, 4: 13.0, 6: 14.0, 10: 18.0, 16: 21.0, 25: 25.0, 35: 29.0,
        50: 34.0, 70: 39.0, 95: 44.0, 120: 50.0, 150: 55.0, 185: 61.0, 240: 67.0, 300: 75.0},
    ("CV", "1C"): {
        1.5: 6.0, 2.5: 6.4, 4: 6.9, 6: 7.5, 10: 9.0, 16: 9.6, 25: 11.5, 35: 12.5,
        50: 14.0, 70: 15.5, 95: 18.0, 120: 19.5, 150: 21.5, 185: 23.5, 240: 26.5, 300: 29.5,
        400: 33.0, 500: 36.0},
    ("CV", "2C"): {
        1.5: 10.5, 2.5: 11.5, 4: 12.5, 6: 13.5, 10: 17.0, 16: 20.0, 25: 24.0, 35: 28.0,
        50: 33.0, 70: 38.0, 95: 43.0, 120: 49.0, 150: 54.0, 185: 60.0, 240: 66.0, 300: 74.0},
    ("FR-CV", "1C"): {
        1.5: 6.8, 2.5: 7.2, 4: 7.7, 6: 8.3, 10: 10.0, 16: 10.6, 25: 12.6, 35: 13.6,
        50: 15.1, 70: 16.6, 95: 19.1, 120: 20.6, 150: 22.6, 185: 24.6, 240: 27.6, 300: 30.6,
        400: 34.6, 500: 37.6},
    ("TFR-8", "1C"): {
        1.5: 6.5, 2.5: 6.9, 4: 7.4, 6: 8.0, 10: 9.6, 16: 10.2, 25: 12.2, 35: 13.2,
        50: 14.7, 70: 16.2, 95: 18.7, 120: 20.2, 150: 22.2, 185: 24.2, 240: 27.2, 300: 30.2},
}

# Cores without their own diameter table are scaled from a measured one.
# Format: {(Cable type, Cores): (Measured cores, Multiplier)}
DIAMETER_SCALING = {
    ("TFR-CV", "3C"): ("2C", 1.15),
    ("TFR-CV", "4C"): ("2C", 1.25),
    ("CV", "3C"): ("2C", 1.15),
    ("CV", "4C"): ("2C", 1.25),
    ("FR-CV", "2C"): ("1C", 1.65),
    ("FR-CV", "3C"): ("1C", 1.9),
    ("FR-CV", "4C"): ("1C", 2.1),
    ("TFR-8", "2C"): ("1C", 1.65),
    ("TFR-8", "3C"): ("1C", 1.9),
    ("TFR-8", "4C"): ("1C", 2.1),
}

# Reduced protective conductor (about half the phase conductor)
# Format: {Phase size: Ground size}
REDUCED_GROUND_SIZE = {
    1.5: 1.5, 2.5: 1.5,
    4: 2.5, 6: 2.5,
    10: 6, 16: 6,
    25: 16, 35: 16,
    50: 25, 70: 25,
    95: 35, 120: 35,
    150: 70, 185: 70,
    240: 95, 300: 95, 400: 95, 500: 95,
}

# Thick steel conduit inner diameters (mm), ascending
# Format: [(Name, Inner diameter)]
CONDUIT_INNER_DIAMETERS = [
    ("C16 (16mm)", 15.8),
    ("C22 (22mm)", 21.0),
    ("C28 (28mm)", 26.6),
    ("C36 (36mm)", 35.0),
    ("C42 (42mm)", 41.0),
    ("C54 (54mm)", 53.0),
    ("C70 (70mm)", 69.0),
    ("C82 (82mm)", 80.0),
    ("C92 (92mm)", 89.0),
    ("C104 (104mm)", 101.0),
]

def build_ampacity_table() -> dict:
    """Flattens AMPACITY_ROWS to {(Insulation, Method, Size): (2 loaded, 3 loaded)}."""
    table = {}
    for (insulation, method), rows in AMPACITY_ROWS.items():
        for size, cell in zip(SIZES_EXTENDED, rows):
            table[(insulation, method, float(size))] = cell
    return table
