from django.contrib.auth.views import LoginView
from django.urls import reverse_lazy


class DashboardLoginView(LoginView):
    """Sign-in page; the role gate decides what a signed-in user may see"""
    template_name = "registration/login.html"
    redirect_authenticated_user = True

    def get_success_url(self):
        return self.get_redirect_url() or reverse_lazy("corecode:home")
