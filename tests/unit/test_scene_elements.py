"""Tests for tagged parameter values and immutable scene elements."""

import dataclasses
import unittest

from pbrtremodel.scene import ElementKind, ParamType, ParamValue, SceneElement


class TestParamValue(unittest.TestCase):
    """Values are normalized to the python type of their tag."""

    def test_numeric_normalization(self):
        self.assertEqual(ParamValue.of("float", 35).value, 35.0)
        self.assertIsInstance(ParamValue.of("float", 35).value, float)
        self.assertEqual(ParamValue.of("integer", 128.0).value, 128)
        self.assertIsInstance(ParamValue.of("integer", 128.0).value, int)
        self.assertEqual(ParamValue.of("color", [1, 2, 3]).value, (1.0, 2.0, 3.0))
        self.assertEqual(ParamValue.of("float", [2]).value, 2.0)

    def test_tag_is_enum(self):
        param = ParamValue.of("point", (0, 0, 0))
        self.assertIs(param.tag, ParamType.POINT)
        self.assertEqual(param.tag.value, "point")

    def test_bools(self):
        self.assertIs(ParamValue.of("bool", True).value, True)
        self.assertIs(ParamValue.of("bool", "false").value, False)
        with self.assertRaises(TypeError):
            ParamValue.of("bool", 1)

    def test_strings_and_spectra(self):
        self.assertEqual(ParamValue.of("string", "a.exr").value, "a.exr")
        self.assertEqual(ParamValue.of("spectrum", "abs.spd").value, "abs.spd")
        self.assertEqual(ParamValue.of("spectrum", [400, 1.0]).value, (400.0, 1.0))
        with self.assertRaises(TypeError):
            ParamValue.of("string", 3)

    def test_invalid_values(self):
        with self.assertRaises(TypeError):
            ParamValue.of("float", "abc")
        with self.assertRaises(TypeError):
            ParamValue.of("integer", 2.5)
        with self.assertRaises(TypeError):
            ParamValue.of("float", True)
        with self.assertRaises(ValueError):
            ParamValue.of("quaternion", 1)

    def test_as_list(self):
        self.assertEqual(ParamValue.of("float", 1).as_list(), [1.0])
        self.assertEqual(ParamValue.of("point", (1, 2, 3)).as_list(), [1.0, 2.0, 3.0])


class TestSceneElement(unittest.TestCase):
    """Elements are values; updates return new elements."""

    def setUp(self):
        """Set up test fixtures."""
        self.camera = SceneElement.create(
            "Camera",
            "perspective",
            [("fov", "float", 45), ("lensradius", "float", 0.1)],
        )

    def test_create(self):
        self.assertIs(self.camera.kind, ElementKind.CAMERA)
        self.assertEqual(self.camera.parameter_names, ["fov", "lensradius"])
        self.assertEqual(self.camera.value("fov"), 45.0)
        self.assertIsNone(self.camera.get("missing"))
        self.assertIsNone(self.camera.value("missing"))

    def test_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            self.camera.type = "pinhole"

    def test_with_parameter_replaces_in_place(self):
        updated = self.camera.with_parameter("fov", "float", 35)
        self.assertEqual(updated.parameter_names, ["fov", "lensradius"])
        self.assertEqual(updated.value("fov"), 35.0)
        self.assertEqual(self.camera.value("fov"), 45.0)

    def test_with_parameter_appends(self):
        updated = self.camera.with_parameter("focaldistance", "float", 10)
        self.assertEqual(
            updated.parameter_names, ["fov", "lensradius", "focaldistance"]
        )

    def test_with_type_and_cleared(self):
        self.assertEqual(
            self.camera.with_type("pinhole").parameters, self.camera.parameters
        )
        cleared = self.camera.cleared("pinhole")
        self.assertEqual(cleared.type, "pinhole")
        self.assertEqual(cleared.parameters, ())
        self.assertEqual(self.camera.cleared().type, "perspective")

    def test_duplicate_names_rejected(self):
        with self.assertRaises(ValueError):
            SceneElement.create(
                "Camera", "pinhole", [("a", "float", 1), ("a", "float", 2)]
            )

    def test_unknown_kind_rejected(self):
        with self.assertRaises(ValueError):
            SceneElement.create("Teapot", "utah")

    def test_dict_round_trip(self):
        element = SceneElement.create(
            ElementKind.VOLUME,
            "water",
            [("p0", "point", (-1, -1, -1)), ("phaseFunctionFile", "string", "p.spd")],
        )
        data = element.to_dict()
        self.assertEqual(data["kind"], "Volume")
        self.assertEqual(data["parameters"][0]["value"], [-1.0, -1.0, -1.0])
        self.assertEqual(SceneElement.from_dict(data), element)

    def test_from_dict_requires_kind_and_type(self):
        with self.assertRaises(ValueError):
            SceneElement.from_dict({"type": "pinhole"})


if __name__ == "__main__":
    unittest.main()
