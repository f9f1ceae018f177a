"""
MFA credential engine

Runs the issuance pipeline for one profile: load the MFA binding, verify
the long-lived identity, exchange a TOTP code for a session token and
write the resulting shell statements.
"""

import logging
import sys
import time
from pathlib import Path
from typing import Callable, Mapping, Optional, TextIO

from .config.loader import MfaBinding, load_binding
from .errors import AuthenticationError, ConfigError, ExchangeError, OutputError
from .shell.renderer import write_credentials
from .sts.exchange import exchange_session_token
from .sts.gateway import SessionCredentials, StsGateway
from .sts.identity import SessionFactory, verify_identity
from .sts.retry import RetryPolicy
from .utils.env import resolve_region, snapshot_environment

logger = logging.getLogger(__name__)

class MfaEngine:
    """
    Issues MFA-backed temporary credentials for a single profile.
    """
    
    def __init__(self, profile: str, output: Optional[TextIO] = None,
                 environ: Optional[Mapping[str, str]] = None,
                 config_path: Optional[Path] = None,
                 session_factory: Optional[SessionFactory] = None,
                 retry_policy: Optional[RetryPolicy] = None,
                 clock: Callable[[], float] = time.time):
        """
        Initialize the engine.
        
        Args:
            profile: AWS profile whose MFA binding is used
            output: Stream receiving the shell statements (default: stdout)
            environ: Environment snapshot (default: copy of os.environ)
            config_path: MFA configuration file (default: ~/.aws/mf-aws.ini)
            session_factory: Builds the long-lived boto3 session
            retry_policy: Retry policy for the token exchange
            clock: Returns the current Unix time
        """
        self.profile = profile
        self.output = output if output is not None else sys.stdout
        self.environ = snapshot_environment(environ)
        self.config_path = config_path
        self.session_factory = session_factory
        self.retry_policy = retry_policy
        self.clock = clock
        self.region = resolve_region(self.environ)
    
    def load_config(self) -> MfaBinding:
        """Load the MFA binding for the engine's profile."""
        try:
            return load_binding(self.profile, self.config_path)
        except ConfigError as e:
            raise ConfigError(f"loading config (profile: {self.profile})") from e
    
    def verify_identity(self) -> StsGateway:
        """Verify the profile's long-lived credentials and return an STS gateway."""
        try:
            gateway, _ = verify_identity(self.profile, self.region, self.session_factory)
        except AuthenticationError as e:
            raise AuthenticationError(f"verifying identity (profile: {self.profile}, region: {self.region})") from e
        return gateway
    
    def get_session_token(self, gateway: StsGateway, binding: MfaBinding) -> SessionCredentials:
        """Exchange a TOTP code for temporary credentials."""
        try:
            return exchange_session_token(gateway, binding, self.retry_policy, self.clock)
        except ExchangeError as e:
            raise ExchangeError("obtaining session token") from e
    
    def output_credentials(self, credentials: SessionCredentials) -> None:
        """Write the shell statements for the issued credentials."""
        try:
            write_credentials(credentials, self.environ, self.output)
        except OutputError as e:
            raise OutputError("writing credentials") from e
    
    def execute(self) -> SessionCredentials:
        """
        Run the whole pipeline.
        
        Returns:
            SessionCredentials: The credentials that were written
        """
        logger.debug("Issuing MFA credentials for profile %s in %s", self.profile, self.region)
        binding = self.load_config()
        gateway = self.verify_identity()
        credentials = self.get_session_token(gateway, binding)
        self.output_credentials(credentials)
        return credentials
