"""Catalog of AWS services with documented Rust SDK clients.

Each :class:`Service` member carries a display name (its value, shown in the
interactive menu). The canonical short name is kept in a separate ordered
table, :data:`CANONICAL_NAMES`, and is used for both the crate name
(``aws-sdk-<name>``) and the docs.rs URL.

Several canonical names differ from the display name: ``EventBridgePipes``
is published as ``aws-sdk-pipes``, ``StepFunctions`` as ``aws-sdk-sfn``, and
so on. The test suite checks that the table covers every member and that
no two members share a canonical name.

Example::

    >>> canonical_name(Service.S3_GLACIER)
    'glacier'
    >>> str(Service.API_GATEWAY_V2)
    'APIGatewayV2'
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional


class Service(Enum):
    """A service client that has a docs.rs reference page."""

    AMPLIFY = "Amplify"
    API_GATEWAY = "APIGateway"
    API_GATEWAY_V2 = "APIGatewayV2"
    APP_FLOW = "AppFlow"
    APP_MESH = "AppMesh"
    APP_RUNNER = "AppRunner"
    APP_SYNC = "AppSync"
    ATHENA = "Athena"
    BATCH = "Batch"
    BEDROCK = "Bedrock"
    BILLING = "Billing"
    BUDGETS = "Budgets"
    CHATBOT = "Chatbot"
    CLOUD9 = "Cloud9"
    CLOUD_FORMATION = "CloudFormation"
    CLOUD_FRONT = "CloudFront"
    CLOUD_TRAIL = "CloudTrail"
    CLOUD_WATCH = "CloudWatch"
    CODE_BUILD = "CodeBuild"
    CODE_CATALYST = "CodeCatalyst"
    CODE_COMMIT = "CodeCommit"
    CODE_DEPLOY = "CodeDeploy"
    CODE_PIPELINE = "CodePipeline"
    COMPREHEND = "Comprehend"
    COMPREHEND_MEDICAL = "ComprehendMedical"
    CONTROL_TOWER = "ControlTower"
    DATA_ZONE = "DataZone"
    DYNAMODB = "DynamoDB"
    EBS = "EBS"
    EC2 = "EC2"
    ECR = "ECR"
    ECS = "ECS"
    EFS = "EFS"
    EKS = "EKS"
    ELASTIC_BEANSTALK = "ElasticBeanstalk"
    ELASTIC_LOAD_BALANCING = "ElasticLoadBalancing"
    ELASTIC_LOAD_BALANCING_V2 = "ElasticLoadBalancingV2"
    EMR = "EMR"
    EVENT_BRIDGE = "EventBridge"
    EVENT_BRIDGE_PIPES = "EventBridgePipes"
    EVENT_BRIDGE_SCHEDULER = "EventBridgeScheduler"
    FIREHOSE = "Firehose"
    GLUE = "Glue"
    GLUE_DATA_BREW = "GlueDataBrew"
    GUARD_DUTY = "GuardDuty"
    IAM = "IAM"
    IDENTITY_STORE = "IdentityStore"
    IOT_GREENGRASS = "IoTGreenGrass"
    IOT_GREENGRASS_V2 = "IoTGreenGrassV2"
    LAMBDA = "Lambda"
    QUICKSIGHT = "QuickSight"
    RAM = "RAM"
    RDS = "RDS"
    REDSHIFT = "RedShift"
    REDSHIFT_DATA = "RedShiftData"
    REDSHIFT_SERVERLESS = "RedShiftServerless"
    S3 = "S3"
    S3_GLACIER = "S3Glacier"
    S3_TABLES = "S3Tables"
    SAGEMAKER = "SageMaker"
    SECRETS_MANAGER = "SecretsManager"
    SES = "SES"
    SQS = "SQS"
    STEP_FUNCTIONS = "StepFunctions"
    SNS = "SNS"
    SSO = "SSO"
    STS = "STS"
    USER_NOTIFICATIONS = "UserNotifications"

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Name shown in the interactive menu."""
        return self.value

    @property
    def canonical_name(self) -> str:
        """Lowercase short name used in crate names and docs URLs."""
        return CANONICAL_NAMES[self]


#: Service -> canonical short name, in catalog order.
CANONICAL_NAMES: Mapping[Service, str] = MappingProxyType(
    {
        Service.AMPLIFY: "amplify",
        Service.API_GATEWAY: "apigateway",
        Service.API_GATEWAY_V2: "apigatewayv2",
        Service.APP_FLOW: "appflow",
        Service.APP_MESH: "appmesh",
        Service.APP_RUNNER: "apprunner",
        Service.APP_SYNC: "appsync",
        Service.ATHENA: "athena",
        Service.BATCH: "batch",
        Service.BEDROCK: "bedrock",
        Service.BILLING: "billing",
        Service.BUDGETS: "budgets",
        Service.CHATBOT: "chatbot",
        Service.CLOUD9: "cloud9",
        Service.CLOUD_FORMATION: "cloudformation",
        Service.CLOUD_FRONT: "cloudfront",
        Service.CLOUD_TRAIL: "cloudtrail",
        Service.CLOUD_WATCH: "cloudwatch",
        Service.CODE_BUILD: "codebuild",
        Service.CODE_CATALYST: "codecatalyst",
        Service.CODE_COMMIT: "codecommit",
        Service.CODE_DEPLOY: "codedeploy",
        Service.CODE_PIPELINE: "codepipeline",
        Service.COMPREHEND: "comprehend",
        Service.COMPREHEND_MEDICAL: "comprehendmedical",
        Service.CONTROL_TOWER: "controltower",
        Service.DATA_ZONE: "datazone",
        Service.DYNAMODB: "dynamodb",
        Service.EBS: "ebs",
        Service.EC2: "ec2",
        Service.ECR: "ecr",
        Service.ECS: "ecs",
        Service.EFS: "efs",
        Service.EKS: "eks",
        Service.ELASTIC_BEANSTALK: "elasticbeanstalk",
        Service.ELASTIC_LOAD_BALANCING: "elasticloadbalancing",
        Service.ELASTIC_LOAD_BALANCING_V2: "elasticloadbalancingv2",
        Service.EMR: "emr",
        Service.EVENT_BRIDGE: "eventbridge",
        Service.EVENT_BRIDGE_PIPES: "pipes",
        Service.EVENT_BRIDGE_SCHEDULER: "scheduler",
        Service.FIREHOSE: "firehose",
        Service.GLUE: "glue",
        Service.GLUE_DATA_BREW: "databrew",
        Service.GUARD_DUTY: "guardduty",
        Service.IAM: "iam",
        Service.IDENTITY_STORE: "identitystore",
        Service.IOT_GREENGRASS: "greengrass",
        Service.IOT_GREENGRASS_V2: "greengrassv2",
        Service.LAMBDA: "lambda",
        Service.QUICKSIGHT: "quicksight",
        Service.RAM: "ram",
        Service.RDS: "rds",
        Service.REDSHIFT: "redshift",
        Service.REDSHIFT_DATA: "redshiftdata",
        Service.REDSHIFT_SERVERLESS: "redshiftserverless",
        Service.S3: "s3",
        Service.S3_GLACIER: "glacier",
        Service.S3_TABLES: "s3tables",
        Service.SAGEMAKER: "sagemaker",
        Service.SECRETS_MANAGER: "secretsmanager",
        Service.SES: "ses",
        Service.SQS: "sqs",
        Service.STEP_FUNCTIONS: "sfn",
        Service.SNS: "sns",
        Service.SSO: "sso",
        Service.STS: "sts",
        Service.USER_NOTIFICATIONS: "notifications",
    }
)


def list_services() -> List[Service]:
    """Return every service in catalog order."""
    return list(Service)


def canonical_name(service: Service) -> str:
    """Return the canonical short name of ``service``."""
    return CANONICAL_NAMES[service]


def find_service(name: str) -> Optional[Service]:
    """Look up a service by display name or canonical name.

    Matching ignores case and surrounding whitespace. Returns ``None`` when
    nothing matches.
    """
    needle = name.strip().lower()
    if not needle:
        return None

    for service in Service:
        if needle in (service.value.lower(), CANONICAL_NAMES[service]):
            return service
    return None
