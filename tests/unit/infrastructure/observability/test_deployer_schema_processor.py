import unittest

from app_deployer_spi.infrastructure.observability.logging.deployer_schema_processor import (
    DeployerSchemaProcessor,
)


class TestDeployerSchemaProcessor(unittest.TestCase):

    def setUp(self):
        self.processor = DeployerSchemaProcessor(service="scaler", environment="qa")

    def test_root_fields(self):
        result = self.processor(None, "info", {"event": "hello", "level": "info", "timestamp": "t0"})

        self.assertEqual(result["message"], "hello")
        self.assertEqual(result["level"], "info")
        self.assertEqual(result["timestamp"], "t0")
        self.assertEqual(result["service"], "scaler")
        self.assertEqual(result["environment"], "qa")
        self.assertNotIn("scale", result)
        self.assertNotIn("extra", result)

    def test_scale_block(self):
        result = self.processor(
            None,
            "warning",
            {
                "event": "scale_not_supported",
                "deployment_id": "app-1",
                "desired_instance_count": "3",
                "deployer": "static",
                "context_component": "ports",
            },
        )

        self.assertEqual(
            result["scale"],
            {"deployment_id": "app-1", "desired_instance_count": 3, "deployer": "static"},
        )
        self.assertEqual(result["context"], {"component": "ports"})

    def test_malformed_count_does_not_raise(self):
        result = self.processor(None, "info", {"event": "x", "desired_instance_count": "many"})

        self.assertIsNone(result["scale"]["desired_instance_count"])
        self.assertIsNone(result["scale"]["deployment_id"])

    def test_error_block_and_extra(self):
        result = self.processor(
            None,
            "error",
            {"event": "boom", "error_type": "InvalidStateError", "error_details": "neg", "attempt": 2},
        )

        self.assertEqual(result["error"], {"type": "InvalidStateError", "details": "neg"})
        self.assertEqual(result["extra"], {"attempt": 2})
