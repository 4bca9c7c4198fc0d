"""Shared service definitions for the generator tests.

Each fixture returns a fresh dict so tests may inspect (but the generator
must never modify) the definition.
"""

from __future__ import annotations

import sys
from typing import Any

import pytest


def make_json_service() -> dict[str, Any]:
    """A DynamoDB-like JSON protocol service."""
    return {
        "metadata": {
            "protocol": "json",
            "signingName": "dynamodb",
            "endpointPrefix": "dynamodb",
            "apiVersion": "2012-08-10",
            "targetPrefix": "DynamoDB_20120810",
            "uid": "dynamodb-2012-08-10",
            "serviceFullName": "Amazon DynamoDB",
            "sourceURL": "https://example.com/dynamodb-2012-08-10.normal.json",
        },
        "documentation": "<p>Amazon DynamoDB is a <b>NoSQL</b> database.</p>",
        "operations": {
            "DescribeTable": {
                "name": "DescribeTable",
                "http": {"method": "POST", "requestUri": "/"},
                "input": {"shape": "DescribeTableInput"},
                "output": {"shape": "DescribeTableOutput"},
                "errors": [
                    {"shape": "ResourceNotFoundException"},
                    {"shape": "InternalServerError"},
                ],
                "documentation": "<p>Returns information about the table.</p>",
            },
            "ListTables": {
                "name": "ListTables",
                "http": {"method": "POST", "requestUri": "/"},
                "output": {"shape": "ListTablesOutput"},
            },
            "PutItem": {
                "name": "PutItem",
                "http": {"method": "POST", "requestUri": "/"},
                "input": {"shape": "PutItemInput"},
            },
        },
        "shapes": {
            "DescribeTableInput": {
                "type": "structure",
                "required": ["TableName"],
                "members": {
                    "TableName": {
                        "shape": "TableName",
                        "documentation": "<p>The name of the table to describe.</p>",
                    },
                },
            },
            "DescribeTableOutput": {
                "type": "structure",
                "members": {"Table": {"shape": "TableDescription"}},
            },
            "ListTablesOutput": {
                "type": "structure",
                "members": {"TableNames": {"shape": "TableNameList"}},
            },
            "PutItemInput": {
                "type": "structure",
                "required": ["TableName", "Item"],
                "members": {
                    "TableName": {"shape": "TableName"},
                    "Item": {"shape": "AttributeMap"},
                    "ReturnValues": {"shape": "ReturnValue"},
                    "Tags": {"shape": "TagList"},
                },
            },
            "TableDescription": {
                "type": "structure",
                "members": {
                    "TableName": {"shape": "TableName"},
                    "ItemCount": {"shape": "Long"},
                },
            },
            "TableNameList": {"type": "list", "member": {"shape": "TableName"}},
            "TagList": {"type": "list", "member": {"shape": "Tag"}},
            "Tag": {
                "type": "structure",
                "required": ["Key"],
                "members": {
                    "Key": {"shape": "TagKey"},
                    "Value": {"shape": "TagValue"},
                },
            },
            "AttributeMap": {
                "type": "map",
                "key": {"shape": "TableName"},
                "value": {"shape": "TableName"},
            },
            "ReturnValue": {"type": "string", "enum": ["NONE", "ALL_OLD"]},
            "TableName": {"type": "string"},
            "TagKey": {"type": "string"},
            "TagValue": {"type": "string"},
            "Long": {"type": "long"},
            "ResourceNotFoundException": {
                "type": "structure",
                "members": {"message": {"shape": "TagValue"}},
            },
            "InternalServerError": {
                "type": "structure",
                "members": {"message": {"shape": "TagValue"}},
            },
        },
        "examples": {
            "DescribeTable": [
                {
                    "title": "To describe a table",
                    "description": "This example describes the Music table.",
                    "input": {"TableName": "Music"},
                    "output": {"Table": {"TableName": "Music", "ItemCount": 0}},
                },
            ],
        },
    }


def make_rest_service() -> dict[str, Any]:
    """An S3-like REST/XML service."""
    return {
        "metadata": {
            "protocol": "rest-xml",
            "signingName": "s3",
            "endpointPrefix": "s3",
            "apiVersion": "2006-03-01",
            "uid": "s3-2006-03-01",
            "serviceFullName": "Amazon Simple Storage Service",
        },
        "operations": {
            "GetObject": {
                "name": "GetObject",
                "http": {"method": "GET", "requestUri": "/{Bucket}/{Key+}"},
                "input": {"shape": "GetObjectRequest"},
                "output": {"shape": "GetObjectOutput"},
                "errors": [{"shape": "NoSuchKey"}],
            },
            "ListBuckets": {
                "name": "ListBuckets",
                "http": {"method": "GET", "requestUri": "/"},
                "output": {"shape": "ListBucketsOutput"},
            },
        },
        "shapes": {
            "GetObjectRequest": {
                "type": "structure",
                "required": ["Bucket", "Key"],
                "members": {
                    "Bucket": {"shape": "BucketName", "location": "uri"},
                    "Key": {"shape": "ObjectKey", "location": "uri"},
                    "Range": {"shape": "Range", "locationName": "Range"},
                },
            },
            "GetObjectOutput": {
                "type": "structure",
                "members": {"Body": {"shape": "Body"}},
            },
            "ListBucketsOutput": {
                "type": "structure",
                "members": {"Buckets": {"shape": "Buckets"}},
            },
            "Buckets": {"type": "list", "member": {"shape": "Bucket"}},
            "Bucket": {
                "type": "structure",
                "members": {"Name": {"shape": "BucketName"}},
            },
            "NoSuchKey": {"type": "structure", "members": {}},
            "BucketName": {"type": "string"},
            "ObjectKey": {"type": "string"},
            "Range": {"type": "string"},
            "Body": {"type": "blob"},
        },
    }


def make_importexport_service() -> dict[str, Any]:
    """The query-protocol service that binds verb and resource per operation."""
    return {
        "metadata": {
            "protocol": "query",
            "signingName": "importexport",
            "endpointPrefix": "importexport",
            "apiVersion": "2010-06-01",
            "uid": "importexport-2010-06-01",
        },
        "operations": {
            "CreateJob": {
                "name": "CreateJob",
                "http": {
                    "method": "POST",
                    "requestUri": "/?Operation=CreateJob",
                },
                "input": {"shape": "CreateJobInput"},
            },
        },
        "shapes": {
            "CreateJobInput": {
                "type": "structure",
                "required": ["JobType"],
                "members": {
                    "JobType": {"shape": "JobType"},
                    "ValidateOnly": {"shape": "ValidateOnly"},
                },
            },
            "JobType": {"type": "string", "enum": ["Import", "Export"]},
            "ValidateOnly": {"type": "boolean"},
        },
    }


def make_ec2_service() -> dict[str, Any]:
    """An EC2-like service whose members are capitalised on the wire."""
    return {
        "metadata": {
            "protocol": "ec2",
            "signingName": "ec2",
            "endpointPrefix": "ec2",
            "apiVersion": "2016-11-15",
            "uid": "ec2-2016-11-15",
        },
        "operations": {
            "DescribeVolumes": {
                "name": "DescribeVolumes",
                "http": {"method": "POST", "requestUri": "/"},
                "input": {"shape": "DescribeVolumesRequest"},
            },
        },
        "shapes": {
            "DescribeVolumesRequest": {
                "type": "structure",
                "required": ["VolumeIds"],
                "members": {
                    "VolumeIds": {
                        "shape": "VolumeIdStringList",
                        "locationName": "VolumeId",
                    },
                    "DryRun": {"shape": "Boolean", "locationName": "dryRun"},
                },
            },
            "VolumeIdStringList": {"type": "list", "member": {"shape": "String"}},
            "String": {"type": "string"},
            "Boolean": {"type": "boolean"},
        },
    }


def make_lambda_service() -> dict[str, Any]:
    """A REST/JSON service whose uid starts with a Python keyword."""
    return {
        "metadata": {
            "protocol": "rest-json",
            "signingName": "lambda",
            "endpointPrefix": "lambda",
            "apiVersion": "2015-03-31",
            "uid": "lambda-2015-03-31",
            "serviceId": "Lambda",
            "serviceFullName": "AWS Lambda",
        },
        "operations": {
            "GetFunction": {
                "name": "GetFunction",
                "http": {
                    "method": "GET",
                    "requestUri": "/2015-03-31/functions/{FunctionName}",
                },
                "input": {"shape": "GetFunctionRequest"},
                "output": {"shape": "GetFunctionResponse"},
                "errors": [{"shape": "ResourceNotFoundException"}],
            },
            "ListFunctions": {
                "name": "ListFunctions",
                "http": {"method": "GET", "requestUri": "/2015-03-31/functions/"},
                "input": {"shape": "ListFunctionsRequest"},
            },
        },
        "shapes": {
            "GetFunctionRequest": {
                "type": "structure",
                "required": ["FunctionName"],
                "members": {
                    "FunctionName": {
                        "shape": "FunctionName",
                        "location": "uri",
                        "locationName": "FunctionName",
                    },
                    "Qualifier": {
                        "shape": "Qualifier",
                        "location": "querystring",
                        "locationName": "Qualifier",
                    },
                },
            },
            "GetFunctionResponse": {
                "type": "structure",
                "members": {"Configuration": {"shape": "FunctionConfiguration"}},
            },
            "FunctionConfiguration": {
                "type": "structure",
                "members": {"FunctionName": {"shape": "FunctionName"}},
            },
            "ListFunctionsRequest": {
                "type": "structure",
                "members": {
                    "MaxItems": {
                        "shape": "MaxItems",
                        "location": "querystring",
                        "locationName": "MaxItems",
                    },
                },
            },
            "ResourceNotFoundException": {"type": "structure", "members": {}},
            "FunctionName": {"type": "string"},
            "Qualifier": {"type": "string"},
            "MaxItems": {"type": "integer"},
        },
    }


@pytest.fixture
def json_service() -> dict[str, Any]:
    return make_json_service()


@pytest.fixture
def rest_service() -> dict[str, Any]:
    return make_rest_service()


@pytest.fixture
def importexport_service() -> dict[str, Any]:
    return make_importexport_service()


@pytest.fixture
def ec2_service() -> dict[str, Any]:
    return make_ec2_service()


@pytest.fixture
def lambda_service() -> dict[str, Any]:
    return make_lambda_service()


@pytest.fixture
def clean_modules():
    """Drop modules imported from generated output after the test."""
    before = set(sys.modules)
    yield
    for name in set(sys.modules) - before:
        sys.modules.pop(name, None)
