"""Template method: a fixed OTP delivery algorithm with channel-specific steps."""

from __future__ import annotations

from abc import ABC, abstractmethod

_DEFAULT_CODE = "1234"


class OtpSender(ABC):
    """Generates a one-time password and sends it; subclasses supply the steps."""

    def __init__(self, code: str = _DEFAULT_CODE) -> None:
        self.code = code
        self.cache: list[str] = []

    def gen_and_send_otp(self, otp_length: int) -> None:
        """Generate, cache, format and send an OTP; errors from sending propagate."""
        otp = self.gen_random_otp(otp_length)
        self.save_otp_cache(otp)
        message = self.get_message(otp)
        self.send_notification(message)

    @abstractmethod
    def gen_random_otp(self, length: int) -> str:
        """Return a new OTP."""

    @abstractmethod
    def save_otp_cache(self, otp: str) -> None:
        """Remember the OTP for later verification."""

    @abstractmethod
    def get_message(self, otp: str) -> str:
        """Build the message that carries the OTP."""

    @abstractmethod
    def send_notification(self, message: str) -> None:
        """Deliver the message."""


class Sms(OtpSender):
    """Delivers OTPs by SMS."""

    def gen_random_otp(self, length: int) -> str:
        otp = self.code
        print(f"SMS: generating random otp {otp}")
        return otp

    def save_otp_cache(self, otp: str) -> None:
        self.cache.append(otp)
        print(f"SMS: saving otp: {otp} to cache")

    def get_message(self, otp: str) -> str:
        return "SMS OTP for login is " + otp

    def send_notification(self, message: str) -> None:
        print(f"SMS: sending sms: {message}")


class Email(OtpSender):
    """Delivers OTPs by e-mail."""

    def gen_random_otp(self, length: int) -> str:
        otp = self.code
        print(f"EMAIL: generating random otp {otp}")
        return otp

    def save_otp_cache(self, otp: str) -> None:
        self.cache.append(otp)
        print(f"EMAIL: saving otp: {otp} to cache")

    def get_message(self, otp: str) -> str:
        return "EMAIL OTP for login is " + otp

    def send_notification(self, message: str) -> None:
        print(f"EMAIL: sending email: {message}")