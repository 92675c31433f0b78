import unittest
from core.errors import Incomplete, NotFound, OutOfRange, SizingError
from core.models import CalculationRequest
from standards import facade

BASE_REQUEST = {
    "cable_type": "CV",
    "cores": "1C",
    "size": "95",
    "quantity": 1,
    "system": "3Φ",
    "ground_wire": "none",
    "install_method": "B1",
}

class TestFacade(unittest.TestCase):

    def request(self, **overrides):
        data = dict(BASE_REQUEST)
        data.update(overrides)
        return data

    def test_list_cable_types_shape(self):
        types = facade.list_cable_types()
        self.assertEqual(len(types), 5)
        self.assertEqual(set(types[0].keys()), {"code", "name", "description", "max_temp", "insulation"})
        self.assertEqual(types[2]["code"], "CV")
        self.assertEqual(types[2]["max_temp"], 90)

    def test_cable_options_shape(self):
        options = facade.cable_options("HFIX")
        self.assertEqual(options["cores"], [("1C", "1C (single-core)")])
        self.assertEqual(len(options["sizes"]), 16)

    def test_full_lists(self):
        self.assertEqual(len(facade.cable_sizes()), 18)
        self.assertEqual([c for c, _ in facade.core_options()], ["1C", "2C", "3C", "4C"])
        self.assertEqual(len(facade.install_methods()), 9)

    def test_filter_chain(self):
        cores = [c for c, _ in facade.cable_options("TFR-CV")["cores"]]
        for_three = facade.cores_for_system("3P", cores)
        self.assertEqual([c for c, _ in for_three], ["1C", "3C", "4C"])
        methods = facade.install_methods_for_cores("4C")
        self.assertIn(("B2", "B2: conduit on wall (multi-core)"), methods)
        self.assertEqual(facade.default_install_method("4C"), "B2")

    def test_calculate_rounds_for_display(self):
        res = facade.calculate(self.request())
        self.assertEqual(res["recommended_conduit"], "C36 (36mm)")
        self.assertEqual(res["total_area"], 254.47)
        self.assertEqual(res["conductor_area"], 95.0)
        self.assertEqual(res["allowable_current"], 269.0)
        self.assertEqual(res["fill_rate"], 26.4)
        self.assertIn("install_method_desc", res)

    def test_calculate_accepts_spellings(self):
        res = facade.calculate(self.request(size="95 mm²", system="3P", ground_wire="HFIX"))
        self.assertEqual(res["ground_size"], 35.0)

    def test_calculate_accepts_built_request(self):
        req = CalculationRequest(cable_type="CV", cores="1C", size=95, quantity=1,
                                 system="3Φ", ground_wire="reduced", install_method="B1")
        res = facade.calculate(req)
        self.assertEqual(res["loaded_conductors"], 3)
        self.assertEqual(res["ground_size"], 35.0)

        with self.assertRaises(NotFound):
            facade.calculate(CalculationRequest(cable_type="CV", cores="2C", size=25, quantity=1,
                                                system="3Φ", install_method="B2"))

    def test_incomplete_selection(self):
        with self.assertRaises(Incomplete):
            facade.calculate(self.request(install_method=""))
        with self.assertRaises(Incomplete):
            facade.calculate(self.request(cores=None))
        with self.assertRaises(Incomplete):
            facade.calculate(self.request(size=""))
        with self.assertRaises(Incomplete):
            facade.cores_for_system("", ["1C"])

    def test_malformed_codes(self):
        with self.assertRaises(NotFound):
            facade.calculate(self.request(cable_type="cv"))
        with self.assertRaises(NotFound):
            facade.calculate(self.request(install_method="B12"))
        with self.assertRaises(NotFound):
            facade.install_methods_for_cores("single")
        with self.assertRaises(NotFound):
            facade.cable_options("TFR CV")

    def test_out_of_range(self):
        with self.assertRaises(OutOfRange):
            facade.calculate(self.request(quantity="0"))
        with self.assertRaises(OutOfRange):
            facade.calculate(self.request(size="7"))

    def test_errors_share_base(self):
        # The UI catches one type and clears its result
        for bad in (self.request(cable_type="XYZ"), self.request(quantity=-2), self.request(cores="")):
            with self.assertRaises(SizingError):
                facade.calculate(bad)

    def test_same_request_same_output(self):
        self.assertEqual(facade.calculate(self.request()), facade.calculate(self.request()))

if __name__ == '__main__':
    unittest.main()
