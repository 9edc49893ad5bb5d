"""Service shapes. Importing this package fills the default shape registry."""

from . import (
    apigateway,
    autoscaling,
    cloudsearch,
    cloudsearchdomain,
    cloudwatch,
    codedeploy,
    dynamodb,
    ec2,
    elastictranscoder,
    events,
    gamelift,
    iam,
    inspector,
    iot,
    rds,
    redshift,
    storagegateway,
)

__all__ = [
    "apigateway",
    "autoscaling",
    "cloudsearch",
    "cloudsearchdomain",
    "cloudwatch",
    "codedeploy",
    "dynamodb",
    "ec2",
    "elastictranscoder",
    "events",
    "gamelift",
    "iam",
    "inspector",
    "iot",
    "rds",
    "redshift",
    "storagegateway",
]
