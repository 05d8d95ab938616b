VERIFICATION_EMAIL_SUBJECT = "Verify your email"
VERIFICATION_EMAIL_TEMPLATE = """<!DOCTYPE html>
<html>
  <body style="font-family: Arial, sans-serif; color: #333;">
    <h1>Verify Your Email</h1>
    <p>Hello,</p>
    <p>Thank you for signing up! Your verification code is:</p>
    <p style="font-size: 32px; font-weight: bold; letter-spacing: 5px;">{verification_code}</p>
    <p>Enter this code on the verification page to complete your registration.</p>
    <p>This code will expire in 24 hours for security reasons.</p>
    <p>If you didn't create an account with us, please ignore this email.</p>
  </body>
</html>
"""

WELCOME_EMAIL_SUBJECT = "Welcome!"
WELCOME_EMAIL_TEMPLATE = """<!DOCTYPE html>
<html>
  <body style="font-family: Arial, sans-serif; color: #333;">
    <h1>Welcome, {name}!</h1>
    <p>Your email address has been verified and your account is ready to use.</p>
  </body>
</html>
"""

PASSWORD_RESET_REQUEST_SUBJECT = "Reset your password"
PASSWORD_RESET_REQUEST_TEMPLATE = """<!DOCTYPE html>
<html>
  <body style="font-family: Arial, sans-serif; color: #333;">
    <h1>Password Reset</h1>
    <p>Hello,</p>
    <p>We received a request to reset your password. If you didn't make this request, please ignore this email.</p>
    <p>To reset your password, click the link below:</p>
    <p><a href="{reset_url}">Reset Password</a></p>
    <p>This link will expire in 1 hour for security reasons.</p>
  </body>
</html>
"""

PASSWORD_RESET_SUCCESS_SUBJECT = "Password reset successful"
PASSWORD_RESET_SUCCESS_TEMPLATE = """<!DOCTYPE html>
<html>
  <body style="font-family: Arial, sans-serif; color: #333;">
    <h1>Password Reset Successful</h1>
    <p>Hello,</p>
    <p>Your password has been successfully reset.</p>
    <p>If you did not initiate this password reset, please contact our support team immediately.</p>
  </body>
</html>
"""
