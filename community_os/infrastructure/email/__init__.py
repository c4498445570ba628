from community_os.infrastructure.email.smtp_sender import SmtpEmailSender

__all__ = ["SmtpEmailSender"]
