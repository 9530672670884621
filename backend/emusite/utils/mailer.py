import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from flask import current_app

SMTP_TIMEOUT = 10


def open_connection(smtp):
    """
    Connect and authenticate using an `smtp` settings dict
    (host, port, username, password).

    Port 465 uses implicit TLS; any other port upgrades with
    STARTTLS when the server offers it.
    """
    host = smtp["host"]
    port = int(smtp["port"])

    if port == 465:
        server = smtplib.SMTP_SSL(host, port, timeout=SMTP_TIMEOUT)
    else:
        server = smtplib.SMTP(host, port, timeout=SMTP_TIMEOUT)
        server.ehlo()
        if server.has_extn("starttls"):
            server.starttls()
            server.ehlo()

    if smtp.get("username"):
        server.login(smtp["username"], smtp.get("password", ""))

    return server


def build_message(sender, recipients, subject, text, html=None):
    message = MIMEMultipart("alternative")
    message["From"] = sender
    message["To"] = ", ".join(recipients)
    message["Subject"] = subject

    message.attach(MIMEText(text, "plain", "utf-8"))
    if html:
        message.attach(MIMEText(html, "html", "utf-8"))

    return message


def send_mail(smtp, recipients, subject, text, html=None):
    """Send one message; SMTP errors propagate to the caller."""
    sender = smtp.get("from_email") or smtp.get("username")
    message = build_message(sender, recipients, subject, text, html)

    server = open_connection(smtp)
    try:
        server.sendmail(sender, list(recipients), message.as_string())
    finally:
        server.quit()

    current_app.logger.info("Mail '%s' sent to %d recipient(s)", subject, len(recipients))


def verify_connection(smtp):
    server = open_connection(smtp)
    server.quit()
