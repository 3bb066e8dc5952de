"""
User-facing copy for every screen.

One table per language; screens never carry their own copy. Lookup falls back
to the configured default language, then English, then the key itself.
"""
from typing import Optional

from app.core.config import settings

LOCALE_COOKIE = "locale"

STRINGS = {
    "en": {
        "app.tagline": "Construction management",
        "nav.logout": "Sign out",
        "nav.admin_panel": "Admin panel",
        "nav.dashboard": "Dashboard",
        "nav.notifications": "Notifications",
        "nav.profile": "My profile",
        "common.save": "Save",
        "common.cancel": "Cancel",
        "common.delete": "Delete",
        "common.edit": "Edit",
        "common.back": "Back",
        "common.actions": "Actions",
        "common.none": "None",
        "common.confirm_delete": "Are you sure you want to delete this record?",
        "common.loading": "Loading...",
        "auth.subtitle": "Sign in to follow your construction sites",
        "auth.email": "Email",
        "auth.password": "Password",
        "auth.sign_in": "Sign in",
        "auth.invalid_credentials": "Wrong email or password. Please try again.",
        "auth.login_required": "Please sign in to continue.",
        "auth.invalid_token": "Your session has expired. Please sign in again.",
        "auth.user_not_found": "Your account is no longer available.",
        "role.admin": "Administrator",
        "role.worker": "Worker",
        "role.client": "Client",
        "project_status.planning": "Planning",
        "project_status.in_progress": "In progress",
        "project_status.paused": "Paused",
        "project_status.completed": "Completed",
        "task_status.pending": "Pending",
        "task_status.in_progress": "In progress",
        "task_status.review": "In review",
        "task_status.approved": "Approved",
        "task_status.rejected": "Rejected",
        "priority.low": "Low",
        "priority.medium": "Medium",
        "priority.high": "High",
        "priority.urgent": "Urgent",
        "severity.low": "Low",
        "severity.medium": "Medium",
        "severity.high": "High",
        "severity.critical": "Critical",
        "issue_status.open": "Open",
        "issue_status.in_progress": "In progress",
        "issue_status.resolved": "Resolved",
        "admin.title": "Control panel",
        "admin.subtitle": "Full view of all your construction sites",
        "stats.active_projects": "Active sites",
        "stats.working_now": "Working now",
        "stats.of_workers": "of {total} workers",
        "stats.open_issues": "Open issues",
        "stats.pending_review": "Awaiting approval",
        "stats.completed_today": "Completed today",
        "stats.average_progress": "Average progress",
        "admin.worker_activity": "Today's activity",
        "admin.no_check_ins": "No check-ins today",
        "admin.worker_stats": "Worker performance",
        "admin.no_workers": "No active workers",
        "admin.recent_issues": "Reported issues",
        "admin.no_issues": "No open issues",
        "admin.review_queue": "Tasks awaiting review",
        "admin.no_review": "No tasks awaiting review",
        "admin.approved_count": "{count} approved",
        "admin.rejected_count": "{count} rejected",
        "admin.average_quality": "Average quality",
        "panel.title": "Administration",
        "panel.users": "Users",
        "panel.projects": "Sites",
        "panel.tasks": "Tasks",
        "users.new": "New user",
        "users.full_name": "Full name",
        "users.email": "Email",
        "users.password": "Password",
        "users.password_hint": "Leave blank to keep the current password",
        "users.role": "Role",
        "users.phone": "Phone",
        "users.active": "Active",
        "users.created": "User created successfully",
        "users.updated": "User updated successfully",
        "users.deleted": "User deleted successfully",
        "users.email_taken": "That email is already registered",
        "users.cannot_delete_self": "You cannot delete your own user",
        "users.cannot_demote_self": "You cannot remove your own admin access",
        "users.required_fields": "Fill in all required fields",
        "projects.new": "New site",
        "projects.name": "Name",
        "projects.address": "Address",
        "projects.description": "Description",
        "projects.client": "Client",
        "projects.status": "Status",
        "projects.budget": "Budget",
        "projects.spent": "Spent",
        "projects.progress": "Progress (%)",
        "projects.start_date": "Start date",
        "projects.expected_end_date": "Expected end date",
        "projects.created": "Site created successfully",
        "projects.updated": "Site updated successfully",
        "projects.deleted": "Site deleted successfully",
        "projects.required_fields": "Name and address are required",
        "projects.invalid_progress": "Progress must be between 0 and 100",
        "projects.invalid_amount": "Budget and spent cannot be negative",
        "tasks.new": "New task",
        "tasks.title": "Title",
        "tasks.description": "Description",
        "tasks.specifications": "Specifications",
        "tasks.project": "Site",
        "tasks.assigned_to": "Assigned to",
        "tasks.status": "Status",
        "tasks.priority": "Priority",
        "tasks.due_date": "Due date",
        "tasks.no_due_date": "No due date",
        "tasks.created": "Task created successfully",
        "tasks.updated": "Task updated successfully",
        "tasks.deleted": "Task deleted successfully",
        "tasks.required_fields": "Title and site are required",
        "tasks.mine": "My tasks",
        "tasks.no_tasks": "You have no open tasks",
        "tasks.start": "Start task",
        "tasks.submit": "Send for review",
        "tasks.add_photo": "Add photo",
        "tasks.photos": "Photos",
        "tasks.no_photos": "No photos yet",
        "tasks.review_notes": "Reviewer notes",
        "tasks.started": "Task started",
        "tasks.submitted": "Task sent for review",
        "tasks.photo_added": "Photo added",
        "tasks.photo_required": "Please add at least one photo before sending for review",
        "tasks.not_assigned": "This task is not assigned to you",
        "tasks.invalid_transition": "This task cannot change to that status now",
        "review.title": "Review task",
        "review.quality_score": "Quality score (0-10)",
        "review.notes": "Notes",
        "review.notes_placeholder": "Describe what needs to be corrected",
        "review.approve": "Approve",
        "review.reject": "Reject",
        "review.approved": "Task approved",
        "review.rejected": "Task rejected",
        "review.notes_required": "Please write the reason for the rejection",
        "review.invalid_score": "The quality score must be between 0 and 10",
        "review.not_in_review": "This task is not awaiting review",
        "worker.greeting": "Hello, {name}!",
        "worker.working": "You are working",
        "worker.check_in_prompt": "Check in to start your day",
        "worker.select_project": "Select the site:",
        "worker.no_projects": "You have no active sites with assigned tasks",
        "worker.start_work": "Start work",
        "worker.end_work": "End work",
        "worker.elapsed": "Time worked",
        "worker.tracking": "Your hours are being recorded automatically.",
        "worker.checkout_notes": "Notes for the day (optional)",
        "worker.checked_in": "Check-in recorded. Have a good day!",
        "worker.checked_out": "Day finished! See you tomorrow!",
        "worker.already_checked_in": "You already have an active check-in",
        "worker.no_active_check_in": "You have no active check-in",
        "worker.project_not_available": "That site is not available for check-in",
        "worker.report_issue": "Report issue",
        "worker.report_issue_hint": "Found a problem on site? Report it here.",
        "issues.list": "Issues",
        "issues.new": "Report an issue",
        "issues.project": "Site",
        "issues.title": "Title",
        "issues.description": "Description",
        "issues.severity": "Severity",
        "issues.photos": "Photos",
        "issues.reported_by": "Reported by",
        "issues.resolve": "Resolve",
        "issues.reported": "Issue reported successfully!",
        "issues.resolved": "Issue marked as resolved",
        "issues.already_resolved": "This issue is already resolved",
        "issues.required_fields": "Fill in all required fields",
        "issues.status": "Status",
        "issues.all": "All",
        "issues.reported_at": "Reported at",
        "issues.no_issues": "No issues found",
        "client.title": "My sites",
        "client.subtitle": "Follow the progress of your construction in real time",
        "client.no_projects": "You have no sites yet",
        "client.progress": "Progress",
        "client.budget": "Budget",
        "client.spent": "Spent",
        "client.remaining": "Remaining",
        "client.over_budget": "Over budget",
        "client.budget_used": "Budget used",
        "client.days_remaining": "{days} days remaining",
        "client.days_late": "{days} days late",
        "client.active_workers": "{count} working now",
        "client.photos": "Photos ({count})",
        "client.no_photos": "No photos yet",
        "client.tasks": "Tasks",
        "client.no_tasks": "No tasks yet",
        "client.tasks_done": "{done} of {total} tasks approved",
        "notif.task_approved.title": "Task approved!",
        "notif.task_approved.message": "Your task \"{title}\" was approved with score {score}/10",
        "notif.task_rejected.title": "Task rejected",
        "notif.task_rejected.message": "Your task \"{title}\" needs corrections: {notes}",
        "notif.task_assigned.title": "New task",
        "notif.task_assigned.message": "You were assigned the task \"{title}\"",
        "notif.task_submitted.title": "Task completed",
        "notif.task_submitted.message": "The task \"{title}\" was completed and awaits approval",
        "notif.issue_reported.title": "New issue reported",
        "notif.issue_reported.message": "{name} reported: {title}",
        "notifications.empty": "No notifications",
        "upload.invalid_type": "Only image files can be uploaded",
        "upload.too_large": "The file is too large",
        "upload.empty": "Choose a file first",
        "profile.updated": "Profile updated",
        "errors.generic": "Something went wrong. Please try again.",
        "errors.not_found": "Not found",
        "errors.forbidden": "You are not allowed to do that",
    },
    "pt": {
        "app.tagline": "Gestão de obras",
        "nav.logout": "Sair",
        "nav.admin_panel": "Painel admin",
        "nav.dashboard": "Início",
        "nav.notifications": "Notificações",
        "nav.profile": "Meu perfil",
        "common.save": "Salvar",
        "common.cancel": "Cancelar",
        "common.delete": "Excluir",
        "common.edit": "Editar",
        "common.back": "Voltar",
        "common.actions": "Ações",
        "common.none": "Nenhum",
        "common.confirm_delete": "Tem certeza que deseja excluir este registro?",
        "common.loading": "Carregando...",
        "auth.subtitle": "Entre para acompanhar suas obras",
        "auth.email": "Email",
        "auth.password": "Senha",
        "auth.sign_in": "Entrar",
        "auth.invalid_credentials": "Email ou senha incorretos. Tente novamente.",
        "auth.login_required": "Entre para continuar.",
        "auth.invalid_token": "Sua sessão expirou. Entre novamente.",
        "auth.user_not_found": "Sua conta não está mais disponível.",
        "role.admin": "Administrador",
        "role.worker": "Funcionário",
        "role.client": "Cliente",
        "project_status.planning": "Planejamento",
        "project_status.in_progress": "Em andamento",
        "project_status.paused": "Pausada",
        "project_status.completed": "Concluída",
        "task_status.pending": "Pendente",
        "task_status.in_progress": "Em andamento",
        "task_status.review": "Em revisão",
        "task_status.approved": "Aprovada",
        "task_status.rejected": "Recusada",
        "priority.low": "Baixa",
        "priority.medium": "Média",
        "priority.high": "Alta",
        "priority.urgent": "Urgente",
        "severity.low": "Baixa",
        "severity.medium": "Média",
        "severity.high": "Alta",
        "severity.critical": "Crítica",
        "issue_status.open": "Aberto",
        "issue_status.in_progress": "Em andamento",
        "issue_status.resolved": "Resolvido",
        "admin.title": "Painel de controle",
        "admin.subtitle": "Visão completa de todas as suas obras",
        "stats.active_projects": "Obras ativas",
        "stats.working_now": "Trabalhando agora",
        "stats.of_workers": "de {total} funcionários",
        "stats.open_issues": "Problemas abertos",
        "stats.pending_review": "Aguardando aprovação",
        "stats.completed_today": "Concluídas hoje",
        "stats.average_progress": "Progresso médio",
        "admin.worker_activity": "Atividade de hoje",
        "admin.no_check_ins": "Nenhuma entrada hoje",
        "admin.worker_stats": "Desempenho dos funcionários",
        "admin.no_workers": "Nenhum funcionário ativo",
        "admin.recent_issues": "Problemas reportados",
        "admin.no_issues": "Nenhum problema aberto",
        "admin.review_queue": "Tarefas aguardando revisão",
        "admin.no_review": "Nenhuma tarefa aguardando revisão",
        "admin.approved_count": "{count} aprovadas",
        "admin.rejected_count": "{count} recusadas",
        "admin.average_quality": "Qualidade média",
        "panel.title": "Administração",
        "panel.users": "Usuários",
        "panel.projects": "Obras",
        "panel.tasks": "Tarefas",
        "users.new": "Novo usuário",
        "users.full_name": "Nome completo",
        "users.email": "Email",
        "users.password": "Senha",
        "users.password_hint": "Deixe em branco para manter a senha atual",
        "users.role": "Função",
        "users.phone": "Telefone",
        "users.active": "Ativo",
        "users.created": "Usuário criado com sucesso!",
        "users.updated": "Usuário atualizado com sucesso!",
        "users.deleted": "Usuário excluído com sucesso!",
        "users.email_taken": "Esse email já está cadastrado",
        "users.cannot_delete_self": "Você não pode excluir seu próprio usuário",
        "users.cannot_demote_self": "Você não pode remover seu próprio acesso de administrador",
        "users.required_fields": "Preencha todos os campos obrigatórios",
        "projects.new": "Nova obra",
        "projects.name": "Nome",
        "projects.address": "Endereço",
        "projects.description": "Descrição",
        "projects.client": "Cliente",
        "projects.status": "Status",
        "projects.budget": "Orçamento",
        "projects.spent": "Gasto",
        "projects.progress": "Progresso (%)",
        "projects.start_date": "Data de início",
        "projects.expected_end_date": "Previsão de término",
        "projects.created": "Obra criada com sucesso!",
        "projects.updated": "Obra atualizada com sucesso!",
        "projects.deleted": "Obra excluída com sucesso!",
        "projects.required_fields": "Nome e endereço são obrigatórios",
        "projects.invalid_progress": "O progresso deve estar entre 0 e 100",
        "projects.invalid_amount": "Orçamento e gasto não podem ser negativos",
        "tasks.new": "Nova tarefa",
        "tasks.title": "Título",
        "tasks.description": "Descrição",
        "tasks.specifications": "Especificações",
        "tasks.project": "Obra",
        "tasks.assigned_to": "Responsável",
        "tasks.status": "Status",
        "tasks.priority": "Prioridade",
        "tasks.due_date": "Prazo",
        "tasks.no_due_date": "Sem prazo",
        "tasks.created": "Tarefa criada com sucesso!",
        "tasks.updated": "Tarefa atualizada com sucesso!",
        "tasks.deleted": "Tarefa excluída com sucesso!",
        "tasks.required_fields": "Título e obra são obrigatórios",
        "tasks.mine": "Minhas tarefas",
        "tasks.no_tasks": "Você não tem tarefas abertas",
        "tasks.start": "Iniciar tarefa",
        "tasks.submit": "Enviar para revisão",
        "tasks.add_photo": "Adicionar foto",
        "tasks.photos": "Fotos",
        "tasks.no_photos": "Nenhuma foto ainda",
        "tasks.review_notes": "Observações do revisor",
        "tasks.started": "Tarefa iniciada",
        "tasks.submitted": "Tarefa enviada para revisão",
        "tasks.photo_added": "Foto adicionada",
        "tasks.photo_required": "Por favor, adicione pelo menos uma foto antes de enviar para revisão",
        "tasks.not_assigned": "Esta tarefa não está atribuída a você",
        "tasks.invalid_transition": "Esta tarefa não pode mudar para esse status agora",
        "review.title": "Revisar tarefa",
        "review.quality_score": "Nota de qualidade (0-10)",
        "review.notes": "Observações",
        "review.notes_placeholder": "Descreva o que precisa ser corrigido",
        "review.approve": "Aprovar",
        "review.reject": "Recusar",
        "review.approved": "Tarefa aprovada",
        "review.rejected": "Tarefa recusada",
        "review.notes_required": "Por favor, escreva o motivo da recusa",
        "review.invalid_score": "A nota de qualidade deve estar entre 0 e 10",
        "review.not_in_review": "Esta tarefa não está aguardando revisão",
        "worker.greeting": "Olá, {name}!",
        "worker.working": "Você está trabalhando",
        "worker.check_in_prompt": "Registre sua entrada para começar o dia",
        "worker.select_project": "Selecione a obra:",
        "worker.no_projects": "Você não tem obras ativas com tarefas atribuídas",
        "worker.start_work": "Iniciar trabalho",
        "worker.end_work": "Finalizar trabalho",
        "worker.elapsed": "Tempo trabalhado",
        "worker.tracking": "O sistema está registrando suas horas automaticamente.",
        "worker.checkout_notes": "Observações do dia (opcional)",
        "worker.checked_in": "Entrada registrada. Bom trabalho!",
        "worker.checked_out": "Jornada finalizada! Até amanhã!",
        "worker.already_checked_in": "Você já tem uma entrada ativa",
        "worker.no_active_check_in": "Você não tem uma entrada ativa",
        "worker.project_not_available": "Essa obra não está disponível para entrada",
        "worker.report_issue": "Reportar problema",
        "worker.report_issue_hint": "Encontrou algum problema na obra? Reporte aqui.",
        "issues.list": "Problemas",
        "issues.new": "Reportar problema",
        "issues.project": "Obra",
        "issues.title": "Título",
        "issues.description": "Descrição",
        "issues.severity": "Gravidade",
        "issues.photos": "Fotos",
        "issues.reported_by": "Reportado por",
        "issues.resolve": "Resolver",
        "issues.reported": "Problema reportado com sucesso!",
        "issues.resolved": "Problema marcado como resolvido",
        "issues.already_resolved": "Este problema já foi resolvido",
        "issues.required_fields": "Preencha todos os campos obrigatórios",
        "issues.status": "Status",
        "issues.all": "Todos",
        "issues.reported_at": "Reportado em",
        "issues.no_issues": "Nenhum problema encontrado",
        "client.title": "Minhas obras",
        "client.subtitle": "Acompanhe o progresso em tempo real das suas construções",
        "client.no_projects": "Você ainda não tem obras",
        "client.progress": "Progresso",
        "client.budget": "Orçamento",
        "client.spent": "Gasto",
        "client.remaining": "Restante",
        "client.over_budget": "Acima do orçamento",
        "client.budget_used": "Orçamento utilizado",
        "client.days_remaining": "{days} dias restantes",
        "client.days_late": "Atrasado {days} dias",
        "client.active_workers": "{count} trabalhando agora",
        "client.photos": "Fotos ({count})",
        "client.no_photos": "Nenhuma foto ainda",
        "client.tasks": "Tarefas",
        "client.no_tasks": "Nenhuma tarefa ainda",
        "client.tasks_done": "{done} de {total} tarefas aprovadas",
        "notif.task_approved.title": "Tarefa aprovada!",
        "notif.task_approved.message": "Sua tarefa \"{title}\" foi aprovada com nota {score}/10",
        "notif.task_rejected.title": "Tarefa recusada",
        "notif.task_rejected.message": "Sua tarefa \"{title}\" precisa de correções: {notes}",
        "notif.task_assigned.title": "Nova tarefa",
        "notif.task_assigned.message": "Você recebeu a tarefa \"{title}\"",
        "notif.task_submitted.title": "Tarefa concluída",
        "notif.task_submitted.message": "A tarefa \"{title}\" foi concluída e aguarda sua aprovação",
        "notif.issue_reported.title": "Novo problema reportado",
        "notif.issue_reported.message": "{name} reportou: {title}",
        "notifications.empty": "Nenhuma notificação",
        "upload.invalid_type": "Apenas imagens podem ser enviadas",
        "upload.too_large": "O arquivo é muito grande",
        "upload.empty": "Escolha um arquivo primeiro",
        "profile.updated": "Perfil atualizado",
        "errors.generic": "Algo deu errado. Tente novamente.",
        "errors.not_found": "Não encontrado",
        "errors.forbidden": "Você não tem permissão para isso",
    },
    "es": {
        "app.tagline": "Gestión de obras",
        "nav.logout": "Salir",
        "nav.admin_panel": "Panel admin",
        "nav.dashboard": "Inicio",
        "nav.notifications": "Notificaciones",
        "nav.profile": "Mi perfil",
        "common.save": "Guardar",
        "common.cancel": "Cancelar",
        "common.delete": "Eliminar",
        "common.edit": "Editar",
        "common.back": "Volver",
        "common.actions": "Acciones",
        "common.none": "Ninguno",
        "common.confirm_delete": "¿Está seguro de que desea eliminar este registro?",
        "common.loading": "Cargando...",
        "auth.subtitle": "Inicia sesión para seguir tus obras",
        "auth.email": "Email",
        "auth.password": "Contraseña",
        "auth.sign_in": "Iniciar sesión",
        "auth.invalid_credentials": "Email o contraseña incorrectos. Inténtalo de nuevo.",
        "auth.login_required": "Inicia sesión para continuar.",
        "auth.invalid_token": "Tu sesión ha expirado. Inicia sesión de nuevo.",
        "auth.user_not_found": "Tu cuenta ya no está disponible.",
        "role.admin": "Administrador",
        "role.worker": "Empleado",
        "role.client": "Cliente",
        "project_status.planning": "Planificación",
        "project_status.in_progress": "En curso",
        "project_status.paused": "Pausada",
        "project_status.completed": "Terminada",
        "task_status.pending": "Pendiente",
        "task_status.in_progress": "En curso",
        "task_status.review": "En revisión",
        "task_status.approved": "Aprobada",
        "task_status.rejected": "Rechazada",
        "priority.low": "Baja",
        "priority.medium": "Media",
        "priority.high": "Alta",
        "priority.urgent": "Urgente",
        "severity.low": "Baja",
        "severity.medium": "Media",
        "severity.high": "Alta",
        "severity.critical": "Crítica",
        "issue_status.open": "Abierto",
        "issue_status.in_progress": "En curso",
        "issue_status.resolved": "Resuelto",
        "admin.title": "Panel de Control",
        "admin.subtitle": "Visión completa de todas sus obras",
        "stats.active_projects": "Obras Activas",
        "stats.working_now": "Trabajando Ahora",
        "stats.of_workers": "de {total} empleados",
        "stats.open_issues": "Problemas Abiertos",
        "stats.pending_review": "Esperando Aprobación",
        "stats.completed_today": "Completados Hoy",
        "stats.average_progress": "Progreso Medio",
        "admin.worker_activity": "Actividad de hoy",
        "admin.no_check_ins": "Ninguna entrada hoy",
        "admin.worker_stats": "Rendimiento de los empleados",
        "admin.no_workers": "Ningún empleado activo",
        "admin.recent_issues": "Problemas reportados",
        "admin.no_issues": "Ningún problema abierto",
        "admin.review_queue": "Tareas esperando revisión",
        "admin.no_review": "Ninguna tarea esperando revisión",
        "admin.approved_count": "{count} aprobadas",
        "admin.rejected_count": "{count} rechazadas",
        "admin.average_quality": "Calidad media",
        "panel.title": "Administración",
        "panel.users": "Usuarios",
        "panel.projects": "Obras",
        "panel.tasks": "Tareas",
        "users.new": "Nuevo usuario",
        "users.full_name": "Nombre completo",
        "users.email": "Email",
        "users.password": "Contraseña",
        "users.password_hint": "Déjalo en blanco para mantener la contraseña actual",
        "users.role": "Rol",
        "users.phone": "Teléfono",
        "users.active": "Activo",
        "users.created": "Usuario creado correctamente",
        "users.updated": "Usuario actualizado correctamente",
        "users.deleted": "Usuario eliminado correctamente",
        "users.email_taken": "Ese email ya está registrado",
        "users.cannot_delete_self": "No puedes eliminar tu propio usuario",
        "users.cannot_demote_self": "No puedes quitar tu propio acceso de administrador",
        "users.required_fields": "Completa todos los campos obligatorios",
        "projects.new": "Nueva obra",
        "projects.name": "Nombre",
        "projects.address": "Dirección",
        "projects.description": "Descripción",
        "projects.client": "Cliente",
        "projects.status": "Estado",
        "projects.budget": "Presupuesto",
        "projects.spent": "Gastado",
        "projects.progress": "Progreso (%)",
        "projects.start_date": "Fecha de inicio",
        "projects.expected_end_date": "Fin previsto",
        "projects.created": "Obra creada correctamente",
        "projects.updated": "Obra actualizada correctamente",
        "projects.deleted": "Obra eliminada correctamente",
        "projects.required_fields": "Nombre y dirección son obligatorios",
        "projects.invalid_progress": "El progreso debe estar entre 0 y 100",
        "projects.invalid_amount": "El presupuesto y el gasto no pueden ser negativos",
        "tasks.new": "Nueva tarea",
        "tasks.title": "Título",
        "tasks.description": "Descripción",
        "tasks.specifications": "Especificaciones",
        "tasks.project": "Obra",
        "tasks.assigned_to": "Asignada a",
        "tasks.status": "Estado",
        "tasks.priority": "Prioridad",
        "tasks.due_date": "Fecha límite",
        "tasks.no_due_date": "Sin fecha límite",
        "tasks.created": "Tarea creada correctamente",
        "tasks.updated": "Tarea actualizada correctamente",
        "tasks.deleted": "Tarea eliminada correctamente",
        "tasks.required_fields": "Título y obra son obligatorios",
        "tasks.mine": "Mis tareas",
        "tasks.no_tasks": "No tienes tareas abiertas",
        "tasks.start": "Iniciar tarea",
        "tasks.submit": "Enviar a revisión",
        "tasks.add_photo": "Añadir foto",
        "tasks.photos": "Fotos",
        "tasks.no_photos": "Aún no hay fotos",
        "tasks.review_notes": "Notas del revisor",
        "tasks.started": "Tarea iniciada",
        "tasks.submitted": "Tarea enviada a revisión",
        "tasks.photo_added": "Foto añadida",
        "tasks.photo_required": "Añade al menos una foto antes de enviar a revisión",
        "tasks.not_assigned": "Esta tarea no está asignada a ti",
        "tasks.invalid_transition": "Esta tarea no puede cambiar a ese estado ahora",
        "review.title": "Revisar tarea",
        "review.quality_score": "Nota de calidad (0-10)",
        "review.notes": "Notas",
        "review.notes_placeholder": "Describe lo que se debe corregir",
        "review.approve": "Aprobar",
        "review.reject": "Rechazar",
        "review.approved": "Tarea aprobada",
        "review.rejected": "Tarea rechazada",
        "review.notes_required": "Por favor, escribe el motivo del rechazo",
        "review.invalid_score": "La nota de calidad debe estar entre 0 y 10",
        "review.not_in_review": "Esta tarea no está esperando revisión",
        "worker.greeting": "¡Hola, {name}!",
        "worker.working": "Estás trabajando",
        "worker.check_in_prompt": "Registra tu entrada para comenzar tu día",
        "worker.select_project": "Selecciona la obra:",
        "worker.no_projects": "No tienes obras activas con tareas asignadas",
        "worker.start_work": "Iniciar Trabajo",
        "worker.end_work": "Finalizar Trabajo",
        "worker.elapsed": "Tiempo trabajado",
        "worker.tracking": "El sistema está registrando tus horas automáticamente.",
        "worker.checkout_notes": "Observaciones del día (opcional)",
        "worker.checked_in": "Entrada registrada. ¡Buen trabajo!",
        "worker.checked_out": "¡Jornada finalizada! ¡Hasta mañana!",
        "worker.already_checked_in": "Ya tienes una entrada activa",
        "worker.no_active_check_in": "No tienes una entrada activa",
        "worker.project_not_available": "Esa obra no está disponible para registrar entrada",
        "worker.report_issue": "Reportar problema",
        "worker.report_issue_hint": "¿Encontraste algún problema en la obra? Repórtalo aquí.",
        "issues.list": "Problemas",
        "issues.new": "Reportar un problema",
        "issues.project": "Obra",
        "issues.title": "Título",
        "issues.description": "Descripción",
        "issues.severity": "Gravedad",
        "issues.photos": "Fotos",
        "issues.reported_by": "Reportado por",
        "issues.resolve": "Resolver",
        "issues.reported": "¡Problema reportado con éxito!",
        "issues.resolved": "Problema marcado como resuelto",
        "issues.already_resolved": "Este problema ya está resuelto",
        "issues.required_fields": "Completa todos los campos obligatorios",
        "issues.status": "Estado",
        "issues.all": "Todos",
        "issues.reported_at": "Reportado el",
        "issues.no_issues": "No se encontraron problemas",
        "client.title": "Mis obras",
        "client.subtitle": "Sigue el progreso de tus construcciones en tiempo real",
        "client.no_projects": "Aún no tienes obras",
        "client.progress": "Progreso",
        "client.budget": "Presupuesto",
        "client.spent": "Gastado",
        "client.remaining": "Restante",
        "client.over_budget": "Sobre el presupuesto",
        "client.budget_used": "Presupuesto utilizado",
        "client.days_remaining": "{days} días restantes",
        "client.days_late": "Atrasado {days} días",
        "client.active_workers": "{count} trabajando ahora",
        "client.photos": "Fotos ({count})",
        "client.no_photos": "Aún no hay fotos",
        "client.tasks": "Tareas",
        "client.no_tasks": "Aún no hay tareas",
        "client.tasks_done": "{done} de {total} tareas aprobadas",
        "notif.task_approved.title": "¡Tarea Aprobada!",
        "notif.task_approved.message": "Su tarea \"{title}\" fue aprobada con nota {score}/10",
        "notif.task_rejected.title": "Tarea Rechazada",
        "notif.task_rejected.message": "Su tarea \"{title}\" necesita correcciones: {notes}",
        "notif.task_assigned.title": "Nueva tarea",
        "notif.task_assigned.message": "Se le asignó la tarea \"{title}\"",
        "notif.task_submitted.title": "Tarea completada",
        "notif.task_submitted.message": "La tarea \"{title}\" fue completada y espera su aprobación",
        "notif.issue_reported.title": "Nuevo problema reportado",
        "notif.issue_reported.message": "{name} reportó: {title}",
        "notifications.empty": "Sin notificaciones",
        "upload.invalid_type": "Solo se pueden subir imágenes",
        "upload.too_large": "El archivo es demasiado grande",
        "upload.empty": "Elige un archivo primero",
        "profile.updated": "Perfil actualizado",
        "errors.generic": "Algo salió mal. Inténtalo de nuevo.",
        "errors.not_found": "No encontrado",
        "errors.forbidden": "No tienes permiso para hacer eso",
    },
}

SUPPORTED_LOCALES = tuple(STRINGS.keys())

def resolve_locale(value: Optional[str]) -> str:
    if value and value in STRINGS:
        return value
    return settings.DEFAULT_LOCALE if settings.DEFAULT_LOCALE in STRINGS else "en"

def translate(key: str, locale: Optional[str] = None, **kwargs) -> str:
    for code in (resolve_locale(locale), settings.DEFAULT_LOCALE, "en"):
        table = STRINGS.get(code, {})
        if key in table:
            text = table[key]
            return text.format(**kwargs) if kwargs else text
    return key
