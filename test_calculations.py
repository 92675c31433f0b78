import unittest
from core.errors import NotFound, OutOfRange, Incomplete
from core.models import CalculationRequest, GroundWire, InsulationClass, System
from standards import kec_tables
from standards.catalog import Catalog
from standards.kec import KECCalculator

def cv_request(**overrides):
    data = dict(cable_type="CV", cores="1C", size=95, quantity=1,
                system=System.THREE_PHASE, ground_wire=GroundWire.NONE, install_method="B1")
    data.update(overrides)
    return CalculationRequest(**data)

class TestKECCalculation(unittest.TestCase):

    def setUp(self):
        self.calc = KECCalculator()

    def test_single_core_b1_three_phase(self):
        # CV 1C 95mm², OD 18.0 -> pi * 9^2 = 254.47 mm²
        # C28: 555.7 * 0.33 = 183.4 (too small), C36: 962.1 * 0.33 = 317.5 -> OK
        res = self.calc.calculate(cv_request())

        self.assertAlmostEqual(res.conductor_area, 95.0)
        self.assertAlmostEqual(res.total_area, 254.47, places=2)
        self.assertEqual(res.recommended_conduit, "C36 (36mm)")
        self.assertAlmostEqual(res.fill_rate, 26.45, places=2)
        # XLPE B1 95mm², 3 loaded -> 269 A, 1 circuit -> factor 1.0
        self.assertEqual(res.base_current, 269.0)
        self.assertEqual(res.grouping_factor, 1.0)
        self.assertEqual(res.allowable_current, 269.0)
        self.assertIn("3 loaded", res.install_method_desc)

    def test_multi_core_grouping(self):
        # CV 4C 25mm² x2, OD = 24 * 1.25 = 30 -> 706.86 mm² each, 1413.72 total
        # C70: 3739.3 * 0.33 = 1234 (too small), C82: 5026.5 * 0.33 = 1658.8 -> OK
        res = self.calc.calculate(cv_request(cores="4C", size=25, quantity=2, install_method="B2"))

        # 25 * 3 current-carrying (neutral not counted) * 2 cables
        self.assertAlmostEqual(res.conductor_area, 150.0)
        self.assertAlmostEqual(res.total_area, 1413.72, places=2)
        self.assertEqual(res.recommended_conduit, "C82 (82mm)")
        # XLPE B2 25mm² 3 loaded = 107 A, 2 circuits -> 0.80
        self.assertEqual(res.circuits, 2)
        self.assertAlmostEqual(res.allowable_current, 85.6)

    def test_four_core_counts_three_conductors(self):
        res = self.calc.calculate(cv_request(cores="4C", size=25, install_method="B2"))
        self.assertAlmostEqual(res.conductor_area, 75.0)

    def test_single_core_cables_form_circuits(self):
        # 1Φ: 2 single-core cables per circuit -> 4 cables = 2 circuits
        res = self.calc.calculate(cv_request(system=System.SINGLE_PHASE, quantity=4))
        self.assertEqual(res.circuits, 2)
        self.assertEqual(res.loaded_conductors, 2)
        # XLPE B1 95mm² 2 loaded = 306 A * 0.80
        self.assertAlmostEqual(res.allowable_current, 244.8)

        # 3Φ: 4 cables -> 2 circuits (partial set still counts)
        res3 = self.calc.calculate(cv_request(quantity=4))
        self.assertEqual(res3.circuits, 2)

    def test_reduced_ground_wire(self):
        # Phase 95mm² -> reduced ground 35mm² HFIX (OD 11.3 -> 100.29 mm²)
        res = self.calc.calculate(cv_request(quantity=3, ground_wire=GroundWire.REDUCED_SIZE))
        self.assertEqual(res.ground_size, 35.0)
        self.assertAlmostEqual(res.conductor_area, 95.0 * 3 + 35.0)
        self.assertAlmostEqual(res.total_area, 254.469 * 3 + 100.287, places=2)
        self.assertEqual(res.recommended_conduit, "C70 (70mm)")

    def test_same_size_ground_wire(self):
        res = self.calc.calculate(cv_request(ground_wire=GroundWire.SAME_SIZE))
        self.assertEqual(res.ground_size, 95.0)
        self.assertAlmostEqual(res.conductor_area, 190.0)

    def test_no_conduit_large_enough(self):
        print("\n--- TEST: Bundle exceeding the largest conduit ---")
        # 20 x CV 1C 500mm² (OD 36) = 20357 mm², C104 holds 8011.8 * 0.33 = 2643.9
        res = self.calc.calculate(cv_request(size=500, quantity=20))
        print(f"Total: {res.total_area:.1f} mm² | Conduit: {res.recommended_conduit} | Fill: {res.fill_rate:.1f}%")

        self.assertEqual(res.recommended_conduit, kec_tables.NONE_FOUND)
        largest = self.calc.catalog.conduit_area_table()[-1][1]
        self.assertAlmostEqual(res.fill_rate, res.total_area / largest * 100.0)
        self.assertGreater(res.fill_rate, 33.0)

    def test_missing_ampacity_cell(self):
        table = kec_tables.build_ampacity_table()
        del table[(InsulationClass.XLPE, "B1", 95.0)]
        calc = KECCalculator(Catalog(ampacity_table=table))

        with self.assertRaises(NotFound):
            calc.calculate(cv_request())

    def test_grouping_beyond_table(self):
        # 60 single-core cables on 3Φ = 20 circuits -> last row of B.52.17
        res = self.calc.calculate(cv_request(size=10, quantity=60, install_method="C"))
        self.assertEqual(res.grouping_factor, 0.38)

        # 61 cables = 21 circuits, the table has no value
        with self.assertRaises(OutOfRange):
            self.calc.calculate(cv_request(size=10, quantity=61, install_method="C"))

    def test_invalid_requests(self):
        with self.assertRaises(OutOfRange):
            self.calc.calculate(cv_request(quantity=0))
        with self.assertRaises(OutOfRange):
            self.calc.calculate(cv_request(cable_type="FR-CV", size=400))
        with self.assertRaises(NotFound):
            self.calc.calculate(cv_request(cable_type="HFIX", cores="3C", install_method="B2"))
        with self.assertRaises(NotFound):
            # 2C is a single-phase construction
            self.calc.calculate(cv_request(cores="2C", install_method="B2"))
        with self.assertRaises(NotFound):
            # B2 is a multi-core method
            self.calc.calculate(cv_request(install_method="B2"))
        with self.assertRaises(NotFound):
            self.calc.calculate(cv_request(cable_type="XYZ"))
        with self.assertRaises(Incomplete):
            self.calc.calculate(cv_request(install_method=""))

    def test_unnormalised_system_rejected(self):
        # Plain "3Φ" string never matches a System member
        with self.assertRaises(NotFound):
            self.calc.calculate(cv_request(system="3Φ"))

    def test_missing_outer_diameter(self):
        # CV is made in 400mm² but there is no multi-core diameter for it
        with self.assertRaises(NotFound):
            self.calc.calculate(cv_request(cores="3C", size=400, install_method="B2"))

    def test_idempotent(self):
        req = cv_request(cores="3C", size=35, quantity=3, install_method="D2",
                         ground_wire=GroundWire.REDUCED_SIZE)
        self.assertEqual(self.calc.calculate(req), self.calc.calculate(req))

if __name__ == '__main__':
    unittest.main()
